# Blob store backends
from clients.valkey_client import ValkeyClient, get_valkey_url
from clients.memory_client import MemoryClient
