"""
Tests for the default descriptions of tasks and consequences.
"""

import pytest

from screenplay.core.interfaces import Consequence, Performable


def make_task(class_name: str) -> Performable:
    task_class = type(class_name, (Performable,), {"perform_as": lambda self, actor: None})
    return task_class()


@pytest.mark.parametrize(
    "class_name, description",
    [
        ("AddToBasket", "add to basket"),
        ("HTTPRequest", "http request"),
        ("OpenURL", "open url"),
        ("ParseXMLHttpResponse", "parse xml http response"),
        ("Step2Checkout", "step 2 checkout"),
        ("PendingC", "pending c"),
        ("login", "login"),
    ],
)
def test_task_description_from_class_name(class_name, description):
    assert str(make_task(class_name)) == description


def test_consequence_description_groups_acronyms():
    class TotalIsInUSD(Consequence):
        def evaluate_for(self, actor):
            pass

    assert str(TotalIsInUSD()) == "total is in usd"
