from .compile import CompileTypes, CompileValidators
from .fetch import FetchSchema
from .format import FormatSource
from .select import SCHEMA_CHANNELS, SelectSchema
from .write import WriteFile
