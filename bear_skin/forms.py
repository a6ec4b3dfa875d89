from django import forms

from .services.attributes import add_class


class SelectWrapper(forms.Select):
    """<select class="form-select"> в обёртке div.select-wrapper (для стилизации стрелки)."""
    template_name = "bear_skin/widgets/select.html"

    def get_context(self, name, value, attrs):
        context = super().get_context(name, value, attrs)
        add_class(context["widget"]["attrs"], "form-select")
        context["widget"]["attrs"]["class"] = " ".join(context["widget"]["attrs"]["class"])
        return context


class SearchBlockForm(forms.Form):
    """Форма поиска в шапке: плейсхолдер и required, как просит тема."""
    q = forms.CharField(
        label="Search",
        max_length=128,
        widget=forms.TextInput(attrs={"placeholder": "Search", "required": "required", "class": "search-block__input"}),
    )

    def __init__(self, *args, action: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.action = action


class StyleguideFilterForm(forms.Form):
    """Независимая форма для витрины: размер страницы через SelectWrapper."""
    per = forms.TypedChoiceField(
        choices=[(10, "10"), (20, "20"), (50, "50")],
        coerce=int,
        initial=10,
        required=False,
        label="Per page",
        widget=SelectWrapper,
    )
