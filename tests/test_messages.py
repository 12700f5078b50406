# This project was developed with assistance from AI tools.
"""Tests for the bilingual message catalog."""

import pytest

from casaready.schemas.enums import LeadType, Locale
from casaready.services.messages import (
    CATALOG,
    LEAD_TYPE_LABELS,
    MessageKey,
    lead_type_label,
    missing_translations,
    render,
)


def test_no_missing_translations():
    assert missing_translations() == {}


@pytest.mark.parametrize("locale", list(Locale))
def test_every_key_has_a_non_empty_template(locale):
    for key in MessageKey:
        assert CATALOG[locale][key].strip(), key


@pytest.mark.parametrize("locale", list(Locale))
def test_every_lead_type_has_a_label(locale):
    for lead_type in LeadType:
        assert LEAD_TYPE_LABELS[locale][lead_type].strip()


def test_render_substitutes_values():
    assert render(MessageKey.LINE_TARGET_AREA, Locale.EN, city="Austin") == (
        "- **Target area**: Austin"
    )
    assert render(MessageKey.TIMELINE_MONTHS, Locale.ES, value="3-6") == "3-6 meses"


def test_locales_differ():
    assert render(MessageKey.TIP_PREAPPROVAL, Locale.EN) != render(
        MessageKey.TIP_PREAPPROVAL, Locale.ES
    )
    assert lead_type_label(LeadType.HIGH_NET_WORTH, Locale.EN) != lead_type_label(
        LeadType.HIGH_NET_WORTH, Locale.ES
    )


def test_missing_key_is_detected(monkeypatch):
    trimmed = {locale: dict(messages) for locale, messages in CATALOG.items()}
    del trimmed[Locale.ES][MessageKey.TIP_VA_BENEFIT]
    monkeypatch.setattr("casaready.services.messages.CATALOG", trimmed)
    assert missing_translations() == {Locale.ES: [MessageKey.TIP_VA_BENEFIT.value]}
