import pytest

from licensit.core.catalog import Catalog
from licensit.core.domain.models import LicenseDescriptor, Placeholders
from licensit.core.renderer import render_raw, render_template


AUTHOR_SENTINEL = "Author Sentinel 7f3c"
YEAR_SENTINEL = 987654321

UNLICENSE_START = "This is free and unencumbered software released into the public domain.\n"
UNLICENSE_END = "For more information, please refer to <https://unlicense.org>\n"


def _bundled(with_placeholders):
    return [d for d in Catalog.load() if (d.placeholders is not None) is with_placeholders]


@pytest.mark.parametrize("descriptor", _bundled(False), ids=lambda d: d.id)
def test_no_placeholders_renders_identity(descriptor):
    raw = render_raw(descriptor)
    assert render_template(descriptor, "Jane Doe", 2023) == raw
    assert render_template(descriptor, "", 0) == raw


@pytest.mark.parametrize("descriptor", _bundled(True), ids=lambda d: d.id)
def test_placeholders_are_fully_replaced(descriptor):
    raw = render_raw(descriptor)
    tokens = descriptor.placeholders
    rendered = render_template(descriptor, AUTHOR_SENTINEL, YEAR_SENTINEL)

    assert tokens.author_token not in rendered
    assert tokens.year_token not in rendered
    assert rendered.count(AUTHOR_SENTINEL) == raw.count(tokens.author_token) > 0
    assert rendered.count(str(YEAR_SENTINEL)) == raw.count(tokens.year_token) > 0


@pytest.mark.parametrize("descriptor", _bundled(True), ids=lambda d: d.id)
def test_reinserting_tokens_restores_template(descriptor):
    tokens = descriptor.placeholders
    rendered = render_template(descriptor, AUTHOR_SENTINEL, YEAR_SENTINEL)
    restored = rendered.replace(AUTHOR_SENTINEL, tokens.author_token).replace(
        str(YEAR_SENTINEL), tokens.year_token
    )
    assert restored == render_raw(descriptor)


def test_unlicense_text_is_fixed():
    descriptor = Catalog.load().find("unlicense")
    rendered = render_template(descriptor, "Jane Doe", 2023)
    assert rendered.startswith(UNLICENSE_START)
    assert rendered.endswith(UNLICENSE_END)
    assert "Jane Doe" not in rendered
    assert "2023" not in rendered


def test_mit_rendering():
    rendered = render_template(Catalog.load().find("mit"), "Jane Doe", 2023)
    assert rendered.startswith("MIT License\n\nCopyright (c) 2023 Jane Doe\n\n")


def test_apache_notice_rendering():
    rendered = render_template(Catalog.load().find("apache-2.0"), "Jane Doe", 2023)
    assert "Copyright 2023 Jane Doe" in rendered


def test_replacement_is_literal_not_regex(memory_store):
    descriptor = LicenseDescriptor(
        id="brackets",
        display_name="Brackets",
        template_ref="t",
        placeholders=Placeholders(author_token="[name of copyright owner]", year_token="[yyyy]"),
    )
    store = memory_store({"t": "Copyright [yyyy] [name of copyright owner]; y n o\n"})
    rendered = render_template(descriptor, r"A\1 $0", 2023, store=store)
    assert rendered == "Copyright 2023 A\\1 $0; y n o\n"


def test_every_occurrence_is_replaced(memory_store):
    descriptor = LicenseDescriptor(
        id="many",
        display_name="Many",
        template_ref="t",
        placeholders=Placeholders(author_token="<a>", year_token="<y>"),
    )
    store = memory_store({"t": "<a><a> <y> <y><a>"})
    assert render_template(descriptor, "X", 1999, store=store) == "XX 1999 1999X"


def test_render_raw_keeps_tokens(memory_store):
    descriptor = LicenseDescriptor(
        id="mit",
        display_name="MIT",
        template_ref="t",
        placeholders=Placeholders(author_token="[fullname]", year_token="[year]"),
    )
    store = memory_store({"t": "(c) [year] [fullname]"})
    assert render_raw(descriptor, store=store) == "(c) [year] [fullname]"
