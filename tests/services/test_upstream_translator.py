"""Unit tests for UpstreamTranslator over real .mo catalogs."""

import pytest

from mo_cache.services import UpstreamTranslator, select_plural_text


@pytest.fixture
def upstream(catalog_file):
    return UpstreamTranslator(catalog_file)


class TestUpstreamTranslator:
    def test_catalog_not_parsed_until_first_lookup(self, upstream):
        assert upstream.is_loaded is False
        upstream.translate("Hello")
        assert upstream.is_loaded is True

    def test_translate(self, upstream):
        assert upstream.translate("Hello") == "Hola"

    def test_translate_with_context(self, upstream):
        assert upstream.translate("Save") == "Salvar"
        assert upstream.translate("Save", "menu") == "Guardar"

    def test_untranslated_text_returned_as_is(self, upstream):
        assert upstream.translate("Goodbye") == "Goodbye"

    @pytest.mark.parametrize(
        "count, expected",
        [(1, "un elemento"), (0, "%d elementos"), (2, "%d elementos"), (-1, "%d elementos")],
    )
    def test_translate_plural(self, upstream, count, expected):
        assert upstream.translate_plural("one item", "%d items", count) == expected

    def test_translate_plural_with_context(self, upstream):
        assert upstream.translate_plural("one file", "%d files", 1, "menu") == "un archivo"
        assert upstream.translate_plural("one file", "%d files", 3, "menu") == "%d archivos"

    def test_untranslated_plural_falls_back_to_source(self, upstream):
        assert upstream.translate_plural("one dog", "%d dogs", 1) == "one dog"
        assert upstream.translate_plural("one dog", "%d dogs", -1) == "one dog"
        assert upstream.translate_plural("one dog", "%d dogs", 4) == "%d dogs"
        assert upstream.translate_plural("one dog", "%d dogs", -4) == "%d dogs"

    def test_untranslated_plural_with_context_falls_back_to_source(self, upstream):
        assert upstream.translate_plural("one dog", "%d dogs", -1, "pets") == "one dog"
        assert upstream.translate_plural("one dog", "%d dogs", 2, "pets") == "%d dogs"

    def test_catalog_parsed_once(self, catalog_file):
        upstream = UpstreamTranslator(catalog_file)
        upstream.translate("Hello")
        catalog_file.unlink()
        assert upstream.translate("Save", "menu") == "Guardar"

    def test_unparseable_catalog_serves_source_text(self, tmp_path):
        broken = tmp_path / "broken.mo"
        broken.write_bytes(b"definitely not a catalog")
        upstream = UpstreamTranslator(broken)

        assert upstream.translate("Hello") == "Hello"
        assert upstream.translate("Save", "menu") == "Save"
        assert upstream.translate_plural("one item", "%d items", -1) == "one item"
        assert upstream.translate_plural("one item", "%d items", 3, "cart") == "%d items"
        assert upstream.is_loaded is True


@pytest.mark.parametrize(
    "count, expected",
    [(1, "one item"), (-1, "one item"), (0, "%d items"), (2, "%d items"), (-2, "%d items")],
)
def test_select_plural_text(count, expected):
    assert select_plural_text("one item", "%d items", count) == expected
