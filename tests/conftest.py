import os

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from skillmap.model.items import RawItem


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def scenario_items() -> list[RawItem]:
    """One topic with two subsections, the topic flagged active."""
    return [
        RawItem.from_dict({"id": "t1", "type": "topic", "name": "T1", "sections": ["s1", "s2"], "isActive": True}),
        RawItem.from_dict({"id": "s1", "type": "subsection", "name": "S1"}),
        RawItem.from_dict({"id": "s2", "type": "subsection", "name": "S2"}),
    ]


@pytest.fixture
def course_items() -> list[RawItem]:
    """Three topics, cross relations (one mutual, one one-way, one dangling)."""
    docs = [
        {"id": "a", "type": "topic", "name": "A", "sections": ["a1", "a2", "a3"], "relatedTo": ["b"]},
        {"id": "a1", "type": "subsection", "name": "A1"},
        {"id": "a2", "type": "subsection", "name": "A2", "relatedTo": ["b1", "missing"]},
        {"id": "a3", "type": "subsection", "name": "A3"},
        {"id": "b", "type": "topic", "name": "B", "sections": ["b1"], "relatedTo": ["a"]},
        {"id": "b1", "type": "subsection", "name": "B1"},
        {"id": "c", "type": "topic", "name": "C", "sections": []},
    ]
    return [RawItem.from_dict(d) for d in docs]
