from .id_sequence import IdSequence as IdSequence
from .repository import Repository as Repository
