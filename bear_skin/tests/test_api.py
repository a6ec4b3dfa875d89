import pytest
from django.urls import reverse

URL = "bear_skin:bear_skin_api:pager"


@pytest.mark.django_db
def test_pager_api_middle_page(client):
    r = client.get(reverse(URL), {"page": 9, "total": 20, "window": 9})
    assert r.status_code == 200
    data = r.json()
    assert (data["page"], data["total"], data["window"]) == (9, 20, 9)
    assert len(data["slots"]) == 15
    assert data["slots"][0] == {"kind": "first", "number": None, "classes": ["pager__item", "pager--first"]}
    assert data["slots"][7] == {"kind": "current", "number": 10, "classes": ["pager__item", "pager--current"]}
    assert data["slots"][8] == {"kind": "number", "number": 11, "classes": ["pager__item"]}


def test_pager_api_defaults(client):
    data = client.get(reverse(URL), {"total": 3}).json()
    assert data["page"] == 0
    assert data["window"] == 9
    assert [s["kind"] for s in data["slots"]] == ["first", "previous", "current", "number", "number", "next", "last"]


def test_pager_api_single_page(client):
    assert client.get(reverse(URL), {"total": 1}).json()["slots"] == []


@pytest.mark.parametrize("params", [
    {},                                  # нет total
    {"total": 10, "window": 0},
    {"total": 10, "page": -1},
    {"total": "ten"},
    {"total": 10, "page": 10},           # страница вне диапазона
    {"total": 10, "window": 101},        # окно шире верхней границы
    {"total": 300000, "window": 300000},
    {"total": 10**6 + 1},
])
def test_pager_api_bad_request(client, params):
    r = client.get(reverse(URL), params)
    assert r.status_code == 400
    assert "error" in r.json()


def test_pager_api_widest_window(client):
    r = client.get(reverse(URL), {"total": 10**6, "window": 100})
    assert r.status_code == 200
    assert r.json()["window"] == 100
