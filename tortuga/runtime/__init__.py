"""
🐢 Tortuga — send integer messages to named actors.

  (add 1 2)          → 3
  (subtract 10 3 2)  → 5
  (multiply 2 3 4)   → 24

| Stage           | Purpose                                           |
<---------------- + ------------------------------------------------- >
| **Lexer**       | Characters → positioned, validated lexemes        |
| **Parser**      | Lexemes → one transmission per source line        |
| **Interpreter** | Transmissions → one output line per value         |
| **Documents**   | Portable `.tortuga.json` programs, hash & diff    |
| **Analysis**    | NetworkX program graph and Graphviz export        |
"""

from . import lexical as _lexical
from . import syntax as _syntax
from . import interpreter as _interpreter
from . import pipeline as _pipeline
from . import document as _document
from . import analysis as _analysis
from .cli import main, parse_args, run_repl
from ..constants import DEFAULT_ENCODING, DOCUMENT_FILE
from ..errors import (
    ArityError,
    InvalidCharacterError,
    LexicalError,
    MessageParseError,
    SourceNotFoundError,
    TortugaError,
    TransmissionSyntaxError,
)
from ..reader import FileReader

from .lexical import *
from .syntax import *
from .interpreter import *
from .pipeline import *
from .document import *
from .analysis import *

__all__ = []
for module in (_lexical, _syntax, _interpreter, _pipeline, _document, _analysis):
    __all__.extend(getattr(module, '__all__', []))
__all__ += ['main', 'parse_args', 'run_repl', 'FileReader', 'DEFAULT_ENCODING', 'DOCUMENT_FILE']
__all__ += ['ArityError', 'InvalidCharacterError', 'LexicalError', 'MessageParseError', 'SourceNotFoundError', 'TortugaError', 'TransmissionSyntaxError']
__all__ = list(dict.fromkeys(__all__))
