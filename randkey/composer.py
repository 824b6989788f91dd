import secrets
from enum import Enum

from .charset import CharacterData, KINDS, classify_char

DEFAULT_UNIT = 1024

class ComposerError(Enum):
    PARSE_ERROR = 1
    INVALID_CONFIG = 2
    UNSUPPORTED_CHARACTER = 3
    INVALID_KIND = 4
    MISSING_CHARACTER = 5
    DELETE_NONEXISTENT = 6

class ComposerException(Exception):
    def __init__(self, error: ComposerError, detail: str = None):
        self.error = error
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"{self.error}: {self.detail}"
        return str(self.error)


def parse_count(value) -> int:
    """
    Converts value (int or decimal string) into a non-negative count.

    Raises:
        ComposerException: PARSE_ERROR if value is not a non-negative integer.
    """
    if isinstance(value, bool):
        raise ComposerException(ComposerError.PARSE_ERROR, f"{value!r} is not a count")
    if isinstance(value, int):
        count = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        count = int(value)
    else:
        raise ComposerException(ComposerError.PARSE_ERROR, f"{value!r} is not a count")

    if count < 0:
        raise ComposerException(ComposerError.PARSE_ERROR, f"{value!r} is negative")
    return count

def parse_unit(value) -> int:
    """
    Like parse_count, but additionally rejects a unit of zero with
    INVALID_CONFIG.
    """
    unit = parse_count(value)
    if unit == 0:
        raise ComposerException(ComposerError.INVALID_CONFIG, "unit can not be zero")
    return unit

def tally(s: str) -> dict:
    """
    Counts the letters, symbols and numbers in s.

    Raises:
        ComposerException: UNSUPPORTED_CHARACTER on the first character that
            is not an ASCII letter, punctuation character or digit.
    """
    counts = {kind: 0 for kind in KINDS}
    for pos, c in enumerate(s):
        kind = classify_char(c)
        if kind is None:
            raise ComposerException(ComposerError.UNSUPPORTED_CHARACTER,
                f"{c!r} at position {pos}")
        counts[kind] += 1
    return counts


class Composer:
    """
    Holds a composition (count of letters, symbols and numbers) and produces
    randomly arranged strings of exactly that composition.

    Example::

        c = Composer(10, 2, 3)
        c.generate()
        print(c)    # e.g. "k3Hb#Tq9WzA)m1r"

    Args:
        letters, symbols, numbers: non-negative int or decimal string.
        unit: Number of characters materialized per generation batch. A
            larger unit trades memory for fewer batches; it has no effect on
            the distribution of the output.
        rng: random.Random compatible source. Defaults to
            secrets.SystemRandom(); pass random.Random(seed) for reproducible
            output.
    """

    def __init__(self, letters, symbols, numbers, unit=DEFAULT_UNIT, rng=None):
        self._counts = {
            "ltr": parse_count(letters),
            "sbl": parse_count(symbols),
            "num": parse_count(numbers),
        }
        self._unit = parse_unit(unit)
        self._value = ""
        self.data = CharacterData()
        self.rng = rng if rng is not None else secrets.SystemRandom()

    @classmethod
    def with_unit(cls, letters, symbols, numbers, unit, rng=None):
        return cls(letters, symbols, numbers, unit=unit, rng=rng)

    @classmethod
    def from_string(cls, s: str, unit=DEFAULT_UNIT, rng=None):
        """
        Returns a Composer whose composition matches the character classes
        found in s. The Composer's value is initialized to s; call generate()
        to obtain a new string of the same shape.
        """
        counts = tally(s)
        composer = cls(counts["ltr"], counts["sbl"], counts["num"], unit=unit, rng=rng)
        composer._value = s
        return composer

    def infer(self, s: str):
        """
        Re-derives the composition and value of this Composer from s.
        On failure, the Composer is left unchanged.
        """
        counts = tally(s)
        self._counts = counts
        self._value = s

    # Composition

    @property
    def letters(self) -> int:
        return self._counts["ltr"]

    @property
    def symbols(self) -> int:
        return self._counts["sbl"]

    @property
    def numbers(self) -> int:
        return self._counts["num"]

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def get_count(self, kind: str) -> int:
        try:
            return self._counts[kind]
        except KeyError:
            raise ComposerException(ComposerError.INVALID_KIND, f"no {kind!r} kind of field") from None

    def set_count(self, kind: str, value):
        if kind not in self._counts:
            raise ComposerException(ComposerError.INVALID_KIND, f"no {kind!r} kind of field")
        self._counts[kind] = parse_count(value)

    @property
    def unit(self) -> int:
        return self._unit

    @unit.setter
    def unit(self, value):
        self._unit = parse_unit(value)

    # Output

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str):
        self._value = str(new_value)

    def is_empty(self) -> bool:
        return len(self._value) == 0

    def __len__(self):
        return len(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return (f"Composer(letters={self.letters}, symbols={self.symbols}, "
            f"numbers={self.numbers}, unit={self.unit})")

    # Generation

    def _batches(self):
        """
        Yields the output in pieces of at most self.unit characters.

        The kind of each position is drawn from the remaining budget with
        probability remaining[kind] / left, i.e. sampling without replacement.
        This makes every arrangement of the kinds equally likely, no matter
        how the output is split into batches.
        """
        remaining = dict(self._counts)
        left = self.total
        while left > 0:
            batch = []
            for _ in range(min(self._unit, left)):
                pick = self.rng.randrange(left)
                for kind in KINDS:
                    if pick < remaining[kind]:
                        break
                    pick -= remaining[kind]
                remaining[kind] -= 1
                left -= 1
                batch.append(self.rng.choice(self.data[kind]))
            yield "".join(batch)

    def generate(self) -> str:
        """
        Replaces the value with a new random string of this composition.

        Returns:
            The newly generated string.

        Raises:
            ComposerException: MISSING_CHARACTER if a kind with a non-zero
                count has an empty alphabet. The value is left unchanged.
        """
        for kind in self.data.missing_kinds():
            if self._counts[kind] > 0:
                raise ComposerException(ComposerError.MISSING_CHARACTER,
                    f"no characters left for {kind!r}")

        self._value = "".join(self._batches())
        return self._value

    join = generate

    # Character data

    def delete(self, chars):
        try:
            self.data.delete(chars)
        except KeyError as exc:
            raise ComposerException(ComposerError.DELETE_NONEXISTENT,
                f"{exc.args[0]!r} is not in the character data") from None

    def replace_data(self, chars):
        try:
            self.data.replace(chars)
        except ValueError as exc:
            raise ComposerException(ComposerError.UNSUPPORTED_CHARACTER,
                f"{exc.args[0]!r}") from None


def to_composer(s: str, unit=DEFAULT_UNIT, rng=None) -> Composer:
    """
    Converts the ASCII string s into a Composer of the same composition.
    """
    return Composer.from_string(s, unit=unit, rng=rng)
