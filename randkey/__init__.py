from .composer import Composer, ComposerError, ComposerException, to_composer, DEFAULT_UNIT
from .charset import CharacterData
