"""Unit tests for the BeautifulSoup DocumentNode adapter."""

import pytest

from rsvp_reader.adapters.soup import SoupNode, load_document, parse_html


@pytest.fixture
def root():
    return parse_html(
        "<html><body>"
        "<div id='outer' class='post  entry'>"
        "<p>One <a href='#'>link</a></p><p>Two</p>"
        "<header><span id='inner'>x</span></header>"
        "</div>"
        "<div id='other'>Other</div>"
        "</body></html>"
    )


class TestSoupNode:

    def test_tag_and_attributes(self, root):
        outer = root.select("#outer")[0]
        assert outer.tag == "div"
        assert outer.node_id == "outer"
        assert outer.class_name == "post entry"
        assert outer.get_attribute("missing") is None

    def test_describe(self, root):
        assert root.select("#outer")[0].describe() == "div#outer.post.entry"

    def test_children_are_elements_only(self, root):
        outer = root.select("#outer")[0]
        assert [child.tag for child in outer.children()] == ["p", "p", "header"]

    def test_select_document_order(self, root):
        assert [node.node_id for node in root.select("#other, #outer")] == ["outer", "other"]

    def test_matches_uses_ancestors(self, root):
        inner = root.select("#inner")[0]
        assert inner.matches("header *")
        assert not root.select("#outer")[0].matches("header *")

    def test_contains_is_inclusive(self, root):
        outer = root.select("#outer")[0]
        inner = root.select("#inner")[0]
        other = root.select("#other")[0]
        assert outer.contains(outer)
        assert outer.contains(inner)
        assert not inner.contains(outer)
        assert not outer.contains(other)

    def test_equality_is_identity(self, root):
        assert root.select("#outer")[0] == root.select("#outer")[0]
        assert root.select("#outer")[0] != root.select("#other")[0]
        assert len({root.select("#outer")[0], root.select("#outer")[0]}) == 1

    def test_clone_is_detached(self, root):
        outer = root.select("#outer")[0]
        clone = outer.clone()
        for link in clone.select("a"):
            link.remove()
        assert "link" not in clone.text()
        assert "link" in outer.text()
        assert not outer.contains(clone)


class TestLoadDocument:

    def test_loads_html_file(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("<p id='p'>Hello</p>", encoding="utf-8")
        root = load_document(page)
        assert isinstance(root, SoupNode)
        assert root.select("#p")[0].text() == "Hello"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "nope.html")

    def test_rejects_other_extensions(self, tmp_path):
        path = tmp_path / "notes.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(ValueError):
            load_document(path)
