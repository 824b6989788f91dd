import string

KINDS = ("ltr", "sbl", "num")

DEFAULT_ALPHABETS = {
    "ltr": string.ascii_uppercase + string.ascii_lowercase,
    "sbl": string.punctuation,
    "num": string.digits,
}

KIND_NAMES = {
    "ltr": "letters",
    "sbl": "symbols",
    "num": "numbers",
}

def classify_char(c: str):
    """
    Returns the kind ("ltr", "sbl" or "num") of the ASCII character c, or
    None if c belongs to none of the three classes.
    """
    if len(c) != 1 or not c.isascii():
        return None
    if c in string.ascii_letters:
        return "ltr"
    elif c in string.digits:
        return "num"
    elif c in string.punctuation:
        return "sbl"
    else:
        return None

class CharacterData:
    """
    Alphabets the generator draws from, one per kind of character.

    Each Composer owns its own CharacterData, so deleting or replacing
    characters never affects other instances.
    """

    def __init__(self, alphabets=None):
        if alphabets is None:
            alphabets = DEFAULT_ALPHABETS
        self._alphabets = {kind: str(alphabets.get(kind, "")) for kind in KINDS}

    def __getitem__(self, kind: str) -> str:
        return self._alphabets[kind]

    def __iter__(self):
        return iter(KINDS)

    def __eq__(self, other):
        if not isinstance(other, CharacterData):
            return NotImplemented
        return self._alphabets == other._alphabets

    def __repr__(self):
        return f"CharacterData({self._alphabets!r})"

    def copy(self) -> "CharacterData":
        return CharacterData(self._alphabets)

    def missing_kinds(self) -> list[str]:
        """
        Returns the kinds whose alphabet is empty.
        """
        return [kind for kind in KINDS if len(self._alphabets[kind]) == 0]

    def kind_of(self, c: str):
        """
        Returns the kind of alphabet that currently contains c, or None.
        """
        if len(c) != 1:
            return None
        for kind in KINDS:
            if c in self._alphabets[kind]:
                return kind
        return None

    def delete(self, chars):
        """
        Removes every character of chars from the alphabet holding it.

        Raises:
            KeyError: A character is not present in any alphabet. Nothing is
                removed in this case.
        """
        for c in chars:
            if self.kind_of(c) is None:
                raise KeyError(c)

        removed = set(chars)
        self._alphabets = {
            kind: "".join(c for c in alphabet if c not in removed)
            for kind, alphabet in self._alphabets.items()
        }

    def replace(self, chars):
        """
        Replaces all alphabets with the characters in chars, sorted into
        kinds by classify_char. Duplicates are dropped, order is kept.

        Raises:
            ValueError: chars contains a character outside the three kinds.
                The alphabets are unchanged in this case.
        """
        new_alphabets = {kind: [] for kind in KINDS}
        for c in chars:
            kind = classify_char(c)
            if kind is None:
                raise ValueError(c)
            if c not in new_alphabets[kind]:
                new_alphabets[kind].append(c)

        self._alphabets = {kind: "".join(cs) for kind, cs in new_alphabets.items()}

    def reset(self):
        self._alphabets = dict(DEFAULT_ALPHABETS)

    def describe(self) -> str:
        parts = []
        for kind in KINDS:
            parts.append(f"{KIND_NAMES[kind]}: {self._alphabets[kind] or '(none)'}")
        return "\n".join(parts)
