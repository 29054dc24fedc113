import pytest

from debtext.license import License

TERMS = "Sample terms, line one.\nSample terms, line two."


def test_parse_name_only():
    lic = License.parse("GPL-3+")
    assert lic.name == "GPL-3+"
    assert lic.text is None


def test_parse_named():
    lic = License.parse("GPL-3+\n" + TERMS)
    assert lic.name == "GPL-3+"
    assert lic.text == TERMS


def test_parse_text_only():
    lic = License.parse("\n" + TERMS)
    assert lic.name is None
    assert lic.text == TERMS


@pytest.mark.parametrize(
    "text",
    ["GPL-3+", "GPL-3+\n" + TERMS, "\n" + TERMS],
)
def test_round_trip(text):
    assert str(License.parse(text)) == text


def test_str_of_constructed():
    assert str(License(name="GPL-3+")) == "GPL-3+"
    assert str(License(text=TERMS)) == "\n" + TERMS
    assert str(License("GPL-3+", TERMS)) == "GPL-3+\n" + TERMS


def test_equality():
    assert License.parse("GPL-3+") == License(name="GPL-3+")
    assert License.parse("GPL-3+") != License.parse("GPL-3+\n" + TERMS)


def test_needs_name_or_text():
    with pytest.raises(ValueError):
        License()