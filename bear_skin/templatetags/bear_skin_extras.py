from django import template

from ..conf import theme_setting
from ..services.attributes import render_attributes
from ..services.pager import PagerState
from ..theme import registry

register = template.Library()


@register.simple_tag(takes_context=True)
def bear_pager(context, page_obj, element=0, quantity=None):
    """
    Пейджер темы для страницы Django Paginator.
    Использование в шаблоне:
      {% load bear_skin_extras %}
      {% bear_pager page_obj %}           : основной пейджер
      {% bear_pager other_page 1 5 %}     : второй пейджер на странице, окно 5
    """
    state = PagerState(
        current_page=page_obj.number - 1,
        total_pages=page_obj.paginator.num_pages,
        window_size=quantity if quantity is not None else theme_setting("PAGER_QUANTITY"),
        element=int(element),
    )
    return registry.render("pager", {"request": context.get("request"), "state": state})


@register.simple_tag(takes_context=True)
def bear_status_messages(context, display=None):
    request = context.get("request")
    if request is None:
        return ""
    return registry.render("status_messages", {"request": request, "display": display})


@register.simple_tag
def bear_breadcrumb(crumbs, separator=None):
    return registry.render("breadcrumb", {"breadcrumb": crumbs, "separator": separator})


@register.simple_tag(takes_context=True)
def bear_render(context, hook, variables=None):
    """Произвольный хук темы: {% bear_render "item_list" bag %}."""
    bag = dict(variables or {})
    bag.setdefault("request", context.get("request"))
    return registry.render(hook, bag)


@register.filter
def bear_attributes(attributes):
    return render_attributes(attributes)
