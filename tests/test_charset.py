import string
import pytest

from randkey.charset import CharacterData, classify_char


@pytest.mark.parametrize("c,kind", [
    ("a", "ltr"), ("Z", "ltr"), ("0", "num"), ("9", "num"),
    ("!", "sbl"), ("~", "sbl"), ("_", "sbl"), ("`", "sbl"),
    (" ", None), ("\t", None), ("\x7f", None), ("é", None), ("٣", None),
])
def test_classify_char(c, kind):
    assert classify_char(c) == kind

def test_default_alphabets():
    data = CharacterData()
    assert len(data["ltr"]) == 52
    assert len(data["sbl"]) == 32
    assert len(data["num"]) == 10
    assert data["sbl"] == string.punctuation
    assert data.missing_kinds() == []

def test_delete_all_or_nothing():
    data = CharacterData()
    with pytest.raises(KeyError):
        data.delete("xyzé")
    assert data == CharacterData()

    data.delete("xyz")
    assert "x" not in data["ltr"]
    assert len(data["ltr"]) == 49
    assert data.kind_of("x") is None

def test_delete_whole_kind():
    data = CharacterData()
    data.delete(string.digits)
    assert data.missing_kinds() == ["num"]

def test_replace_dedups_and_keeps_order():
    data = CharacterData()
    data.replace("baab!?!21")
    assert data["ltr"] == "ba"
    assert data["sbl"] == "!?"
    assert data["num"] == "21"

def test_replace_rejects_unsupported():
    data = CharacterData()
    with pytest.raises(ValueError):
        data.replace("ab c")
    assert data == CharacterData()

def test_reset_and_copy():
    data = CharacterData()
    other = data.copy()
    data.replace("a")
    assert data.missing_kinds() == ["sbl", "num"]
    assert other == CharacterData()
    data.reset()
    assert data == other

def test_data_description():
    data = CharacterData({"ltr": "ab", "num": "1"})
    assert data.describe() == "\n".join([
        "letters: ab",
        "symbols: (none)",
        "numbers: 1",
    ])

@pytest.mark.parametrize("c", ["ab", "12", "", "!?"])
def test_classify_rejects_non_single_characters(c):
    assert classify_char(c) is None

def test_kind_of_single_characters_only():
    data = CharacterData()
    assert data.kind_of("1") == "num"
    assert data.kind_of("12") is None
    assert data.kind_of("") is None

def test_delete_list_of_characters():
    data = CharacterData()
    data.delete(["1", "2"])
    assert data["num"] == "03456789"

@pytest.mark.parametrize("chars", [["12"], [""], ["3", "ab"]])
def test_delete_rejects_non_single_characters(chars):
    data = CharacterData()
    with pytest.raises(KeyError):
        data.delete(chars)
    assert data == CharacterData()

@pytest.mark.parametrize("chars", [["ab"], [""], ["x", "!?"]])
def test_replace_rejects_non_single_characters(chars):
    data = CharacterData()
    with pytest.raises(ValueError):
        data.replace(chars)
    assert data == CharacterData()
