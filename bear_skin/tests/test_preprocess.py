from bear_skin.conf import get_setting
from bear_skin.forms import SearchBlockForm
from bear_skin.theme import registry


# ---------- html ----------
def test_html_front_anonymous(make_request):
    variables = registry.preprocess("html", {"request": make_request("/")})
    assert variables["skip_link_anchor"] == "main-content"
    assert variables["classes_array"] == ["front", "not-logged-in"]
    assert 'lang="en-us"' in variables["html_attributes"]
    assert 'dir="ltr"' in variables["html_attributes"]
    assert variables["body_classes"] == "front not-logged-in"


def test_html_section_class(make_request, admin_user):
    variables = registry.preprocess("html", {"request": make_request("/styleguide/colors/", user=admin_user)})
    assert variables["classes_array"] == ["not-front", "logged-in", "section-styleguide"]


# ---------- page ----------
def _page(request, **extra):
    return registry.preprocess("page", dict({"request": request, "page": {}}, **extra))


def test_front_page_gets_hidden_title(make_request):
    variables = _page(make_request("/"))
    assert variables["bear_page_title"] == f"{get_setting('SITE_NAME')} Homepage"


def test_page_keeps_own_title(make_request):
    assert _page(make_request("/styleguide/"), title="Styleguide")["bear_page_title"] == "Styleguide"


def test_page_template_suggestion(make_request):
    variables = _page(make_request("/styleguide/"), content_type="News item")
    assert variables["template_suggestions"] == ["bear_skin/page--news-item.html"]


def test_page_sidebar_flags(make_request):
    variables = _page(make_request("/"), page={"sidebar_first": "<div>a</div>"})
    assert variables["has_sidebar_first"] is True
    assert variables["has_sidebar_second"] is False


def test_anonymous_user_menu(make_request):
    menu = _page(make_request("/"))["user_menu"]
    assert 'href="/accounts/login/"' in menu
    assert "Log in" in menu
    assert 'role="menubar"' in menu
    assert "nav-user__link" in menu
    assert 'role="menuitem"' in menu


def test_staff_user_menu(make_request, admin_user):
    menu = _page(make_request("/", user=admin_user))["user_menu"]
    assert "Administration" in menu
    # выход только POST-запросом
    assert 'method="post" action="/accounts/logout/"' in menu
    assert "Log in" not in menu


def test_page_search_form(make_request):
    page = _page(make_request("/", q="bear"))["page"]
    form = page["bear_search_form"]
    assert isinstance(form, SearchBlockForm)
    assert form.action == "/styleguide/"
    assert form.is_valid()
    widget = str(form["q"])
    assert 'placeholder="Search"' in widget
    assert "required" in widget


# ---------- регионы, материалы, блоки ----------
def test_region():
    variables = registry.preprocess("region", {"region": "sidebar_first"})
    assert variables["classes_array"] == ["region--sidebar-first"]
    assert variables["attributes_array"] == {"role": "region"}


def test_node_teaser():
    variables = registry.preprocess("node", {"type": "article", "view_mode": "teaser"})
    assert variables["classes_array"] == ["node-article-teaser"]
    assert variables["title_attributes_array"]["class"] == ["node-teaser__title", "node-article-teaser__title"]
    assert variables["template_suggestions"][0] == "bear_skin/node--teaser.html"


def test_node_full():
    variables = registry.preprocess("node", {"type": "page", "view_mode": "full"})
    assert variables["classes_array"] == ["node-full", "node-page-full"]
    assert variables["template_suggestions"] == []


def test_block():
    variables = registry.preprocess("block", {"block": {"module": "menu_block", "delta": "1", "region": "sidebar_first"}})
    assert variables["classes_array"] == ["block__menu-block-1", "block__menu-block-1--sidebar-first"]


# ---------- списки ----------
def test_listing():
    variables = registry.preprocess("listing", {"display": "page_1", "css_name": "news"})
    assert variables["classes_array"] == ["news-page-1-view"]


def test_listing_rows():
    variables = registry.preprocess("listing_rows", {
        "name": "news", "display": "page_1", "classes_array": ["views-row views-row-1", ""],
    })
    assert variables["classes_array"] == [
        "views-row views-row-1 news-page-1-view__row",
        "news-page-1-view__row",
    ]


# ---------- меню ----------
def test_menu_block_wrapper_main_menu():
    variables = registry.preprocess("menu_block_wrapper", {"config": {"menu_name": "main-menu"}})
    assert variables["classes_array"] == ["site-navigation", "main-menu"]
    assert variables["template_suggestions"] == ["menu_block_wrapper__menu_main_menu"]


def test_menu_block_wrapper_other_menu():
    variables = registry.preprocess("menu_block_wrapper", {"config": {"menu_name": "footer"}})
    assert variables["classes_array"] == ["footer"]


def test_menu_link_active_parent():
    element = {
        "title": "Docs",
        "href": "/docs/",
        "attributes": {"class": ["active"]},
        "original_link": {"menu_name": "main-menu", "depth": 1, "expanded": True, "has_children": True},
    }
    registry.preprocess("menu_link", {"element": element})

    li = element["attributes"]
    assert li["class"] == ["main-menu__item", "level-1", "parent", "active"]
    assert li["role"] == "presentation"
    assert li["data-menu-name"] == "main-menu"

    a = element["localized_options"]["attributes"]
    assert a["class"] == ["main-menu__link", "active"]
    assert a["role"] == "menuitem"
    assert a["aria-haspopup"] == "true"


def test_menu_link_leaf():
    element = {"original_link": {"menu_name": "footer", "depth": 2}}
    registry.preprocess("menu_link", {"element": element})
    assert element["attributes"]["class"] == ["footer__item", "level-2"]
    assert element["localized_options"]["attributes"]["aria-haspopup"] == "false"


def test_menu_tree_takes_name_from_first_link():
    links = [{"attributes": {"data-menu-name": "main-menu", "data-menu-depth": 2}}]
    variables = registry.preprocess("menu_tree", {"links": links})
    assert variables["menu_name"] == "main-menu"
    assert variables["menu_depth"] == "2"


def test_menu_tree_empty():
    variables = registry.preprocess("menu_tree", {"links": []})
    assert variables["menu_name"] == ""
