import os
from dotenv import load_dotenv

load_dotenv()

# Konfigurasi hashing
# Seed murmur3 harus sama di semua klien, kalau tidak penempatan key akan berbeda.
HASH_SEED = int(os.getenv("RENDEZVOUS_HASH_SEED", 0))

# Encoding yang dipakai string_funnel untuk mengubah str menjadi bytes
STRING_ENCODING = os.getenv("RENDEZVOUS_STRING_ENCODING", "utf-8")

# Konfigurasi logging
SELECTOR_NAME = os.getenv("RENDEZVOUS_SELECTOR_NAME", "rendezvous")
LOG_LEVEL = os.getenv("RENDEZVOUS_LOG_LEVEL", "INFO")
