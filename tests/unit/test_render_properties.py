#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Property-based tests for plain text rendering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdplain.ast import builder as b
from mdplain.renderers.plaintext import render

# No brackets or newlines, so markers and separators in the output can be counted
words = st.text(alphabet="abcdefghij XYZ.,", min_size=1, max_size=12)

inline = st.recursive(
    words.map(b.text),
    lambda children: st.one_of(
        st.lists(children, min_size=1, max_size=3).map(lambda c: b.emphasis(*c)),
        st.lists(children, min_size=1, max_size=3).map(lambda c: b.strong(*c)),
        st.lists(children, min_size=1, max_size=3).map(lambda c: b.strikethrough(*c)),
        st.tuples(words, st.lists(children, max_size=3)).map(lambda t: b.link(t[0], *t[1])),
    ),
    max_leaves=8,
)

paragraph = st.lists(inline, min_size=1, max_size=4).map(lambda c: b.paragraph(*c))
document = st.lists(paragraph, max_size=5).map(lambda c: b.root(*c))


@pytest.mark.unit
class TestRenderProperties:
    """Invariants that hold for every generated document."""

    @given(document)
    def test_deterministic(self, tree) -> None:
        assert render(tree) == render(tree)

    @given(document)
    def test_markers_balanced(self, tree) -> None:
        result = render(tree)
        assert result.count("[") == result.count("]")
        assert result.count("(") == result.count(")")

    @given(document)
    def test_one_separator_between_paragraphs(self, tree) -> None:
        assert render(tree).count("\n") == max(len(tree.children) - 1, 0)

    @given(st.lists(words, min_size=1, max_size=6))
    def test_paragraph_lines(self, texts) -> None:
        tree = b.root(*(b.paragraph(b.text(t)) for t in texts))
        assert render(tree).split("\n") == texts

    @given(st.lists(inline, min_size=1, max_size=4))
    def test_emphasis_is_transparent(self, children) -> None:
        plain = b.root(b.paragraph(*children))
        wrapped = b.root(b.paragraph(b.emphasis(*children)))
        assert render(wrapped) == render(plain)

    @given(st.lists(inline, min_size=1, max_size=4))
    def test_strong_is_transparent(self, children) -> None:
        plain = b.root(b.paragraph(*children))
        wrapped = b.root(b.paragraph(b.strong(*children)))
        assert render(wrapped) == render(plain)
