"""Tests for hit-testing."""

from pen_editor import curves
from pen_editor.hit_testing import hit_test
from pen_editor.types import AnchorHit, Document, HandleHit, HandleKind, NoHit, Path, Point


def _document(*paths: list[tuple[float, float]]) -> Document:
    document = Document(paths=[Path() for _ in paths])
    for i, points in enumerate(paths):
        for x, y in points:
            curves.add_anchor(document, i, Point(x=x, y=y))
    return document


class TestHitTest:
    def test_empty_document(self) -> None:
        assert hit_test(Document(), Point(x=0, y=0)) == NoHit()

    def test_hits_anchor(self) -> None:
        document = _document([(100, 100)])
        assert hit_test(document, Point(x=103, y=104)) == AnchorHit(path_index=0, anchor_index=0)

    def test_threshold_is_strict(self) -> None:
        document = _document([(100, 100)])
        # Exactly on the radius
        assert hit_test(document, Point(x=100, y=110)) == NoHit()
        assert isinstance(hit_test(document, Point(x=100, y=109.99)), AnchorHit)

    def test_custom_threshold(self) -> None:
        document = _document([(100, 100)])
        assert hit_test(document, Point(x=100, y=105), threshold=5) == NoHit()
        assert isinstance(hit_test(document, Point(x=100, y=118), threshold=20), AnchorHit)

    def test_hits_outgoing_handle(self) -> None:
        document = _document([(100, 100)])
        hit = hit_test(document, Point(x=131, y=101))
        assert hit == HandleHit(path_index=0, anchor_index=0, kind=HandleKind.OUTGOING)

    def test_incoming_handle_never_hit(self) -> None:
        document = _document([(100, 100)])
        assert hit_test(document, Point(x=70, y=100)) == NoHit()

    def test_absent_outgoing_handle_not_hit(self) -> None:
        document = _document([(100, 100)])
        curves.set_handle(document, 0, 0, HandleKind.OUTGOING, None)
        assert hit_test(document, Point(x=130, y=100)) == NoHit()

    def test_anchor_beats_handle_in_same_path(self) -> None:
        # Anchor 1 at (136, 100) and the outgoing handle of anchor 0 at (130, 100)
        # are both within range of (133, 100).
        document = _document([(100, 100), (136, 100)])
        hit = hit_test(document, Point(x=133, y=100))
        assert hit == AnchorHit(path_index=0, anchor_index=1)

    def test_earlier_path_handle_beats_later_anchor(self) -> None:
        document = _document([(100, 100)], [(134, 100)])
        hit = hit_test(document, Point(x=132, y=100))
        assert hit == HandleHit(path_index=0, anchor_index=0)

    def test_first_anchor_wins(self) -> None:
        document = _document([(0, 0), (4, 0)])
        assert hit_test(document, Point(x=2, y=0)) == AnchorHit(path_index=0, anchor_index=0)

    def test_later_path(self) -> None:
        document = _document([(0, 0)], [(300, 300)])
        assert hit_test(document, Point(x=301, y=299)) == AnchorHit(path_index=1, anchor_index=0)
