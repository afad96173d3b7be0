#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for grouping consecutive labeled code blocks into tab groups."""
import pytest

from mdlayout.ast import Element, Text
from mdlayout.transforms import coalesce_tab_groups, is_labeled_code_block


def code(label=None, content="x"):
    return Element("pre", [Text(content)], label=label)


@pytest.mark.unit
class TestIsLabeledCodeBlock:
    """Test recognition of labeled code blocks."""

    def test_labeled(self):
        assert is_labeled_code_block(code("js"))

    @pytest.mark.parametrize("node", [code(None), code(""), Element("p", [], label="js"), Text("pre")])
    def test_not_labeled(self, node):
        assert not is_labeled_code_block(node)


@pytest.mark.unit
class TestCoalesceTabGroups:
    """Test in-place coalescing of sibling lists."""

    def test_two_blocks_and_paragraph(self):
        code_a, code_b, para = code("js"), code("py"), Element("p", [Text("after")])
        nodes = [code_a, code_b, para]

        assert coalesce_tab_groups(nodes) == 1
        assert len(nodes) == 2
        assert nodes[0].tag == "tabs"
        assert nodes[0].children[0] is code_a
        assert nodes[0].children[1] is code_b
        assert nodes[1] is para

    def test_single_labeled_block_unchanged(self):
        block = code("js")
        nodes = [Element("p", [Text("x")]), block]
        assert coalesce_tab_groups(nodes) == 0
        assert nodes[1] is block

    def test_unlabeled_block_breaks_run(self):
        nodes = [code("js"), code(None), code("py")]
        assert coalesce_tab_groups(nodes) == 0
        assert [n.tag for n in nodes] == ["pre", "pre", "pre"]

    def test_separate_runs(self):
        nodes = [code("a"), code("b"), code("c"), Element("hr"), code("d"), code("e")]
        assert coalesce_tab_groups(nodes) == 2
        assert [n.tag for n in nodes] == ["tabs", "hr", "tabs"]
        assert len(nodes[0].children) == 3
        assert len(nodes[2].children) == 2

    def test_nested_lists_coalesced(self):
        quote = Element("blockquote", [code("js"), code("py")])
        item = Element("li", [Element("p", [Text("Install:")]), code("sh"), code("ps")])
        nodes = [quote, Element("ul", [item])]

        assert coalesce_tab_groups(nodes) == 2
        assert quote.children[0].tag == "tabs"
        assert [n.tag for n in item.children] == ["p", "tabs"]

    def test_nested_coalesced_before_parent_level(self):
        inner = Element("blockquote", [code("a"), code("b")])
        nodes = [inner, code("c"), code("d")]

        assert coalesce_tab_groups(nodes) == 2
        assert nodes[0] is inner
        assert inner.children[0].tag == "tabs"
        assert nodes[1].tag == "tabs"

    def test_empty_list(self):
        nodes = []
        assert coalesce_tab_groups(nodes) == 0
        assert nodes == []
