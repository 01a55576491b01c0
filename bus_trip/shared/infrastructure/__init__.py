from .dynamodb_id_sequence import DynamoDBIdSequence as DynamoDBIdSequence
from .in_memory_id_sequence import InMemoryIdSequence as InMemoryIdSequence
