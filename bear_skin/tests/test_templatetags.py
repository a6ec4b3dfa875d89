import pytest
from django.core.paginator import Paginator
from django.template import Context, Template

from bear_skin.services.pager import InvalidArgument, PagerState


def _render(source, **context):
    return Template("{% load bear_skin_extras %}" + source).render(Context(context))


def test_bear_pager_tag(make_request):
    page_obj = Paginator(range(50), 10).page(2)
    html = _render("{% bear_pager page_obj %}", request=make_request("/list/"), page_obj=page_obj)
    assert '<span aria-current="page" class="pager__text">2</span>' in html
    assert 'href="/list/?page=2"' in html


def test_bear_pager_tag_second_element_and_quantity(make_request):
    page_obj = Paginator(range(100), 5).page(1)
    html = _render("{% bear_pager page_obj 1 3 %}", request=make_request("/", page="4"), page_obj=page_obj)
    assert 'href="/?page=4,1"' in html
    assert 'title="Go to page 3"' in html
    assert 'title="Go to page 4"' not in html


def test_bear_pager_tag_single_page(make_request):
    page_obj = Paginator(range(3), 10).page(1)
    assert _render("{% bear_pager page_obj %}", request=make_request("/"), page_obj=page_obj) == ""


def test_bear_pager_tag_zero_quantity(make_request):
    page_obj = Paginator(range(100), 10).page(1)
    with pytest.raises(InvalidArgument):
        _render("{% bear_pager page_obj 0 0 %}", request=make_request("/"), page_obj=page_obj)


def test_bear_status_messages_without_request():
    assert _render("{% bear_status_messages %}") == ""


def test_bear_breadcrumb():
    html = _render('{% bear_breadcrumb crumbs "|" %}', crumbs=[("Home", "/")])
    assert 'aria-hidden="true">|</span>' in html


def test_bear_render_pager_state(make_request):
    html = _render('{% bear_render "pager" bag %}', request=make_request("/"), bag={"state": PagerState(1, 3)})
    assert 'aria-current="page" class="pager__text">2<' in html


def test_bear_attributes_filter():
    assert _render("<ul{{ attrs|bear_attributes }}>", attrs={"class": ["a", "b"], "role": "list"}) == \
        '<ul class="a b" role="list">'
