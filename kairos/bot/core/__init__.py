from .bot import Kairos
from .cog import Cog
from .translator import BabelTranslator
