# rendezvous/utils/rendezvous_hash.py

import logging
import threading
import time

from .config import SELECTOR_NAME
from .hashing import murmur3_128, string_funnel
from .metrics import record_latency, increment_counter


class RendezvousHash:
    """
    Implementasi Rendezvous / Highest Random Weight (HRW) hashing.

    Setiap pasangan (key, node) diberi skor hash(key_funnel(key) + node_funnel(node)),
    lalu key diberikan ke node dengan skor tertinggi. Semua klien yang memakai
    fungsi hash, funnel, dan pool yang sama akan sepakat tanpa koordinasi.

    Pool disimpan sebagai frozenset yang diganti utuh setiap kali berubah
    (snapshot-and-swap). Pembaca (get) tidak pernah mengambil lock; penulis
    (add/remove) saling antre lewat satu threading.Lock.

    Prasyarat untuk pemanggil: hash_function dan funnel harus deterministik, dan
    dua nilai yang sama (==) harus menghasilkan bytes yang sama.
    """

    def __init__(self, hash_function=None, key_funnel=string_funnel, node_funnel=string_funnel,
                 nodes=None, name=SELECTOR_NAME):
        self.hash_function = hash_function or murmur3_128
        self.key_funnel = key_funnel
        self.node_funnel = node_funnel
        self.name = name

        self._write_lock = threading.Lock()  # Hanya untuk add/remove
        self._nodes = frozenset(nodes or ())

        logging.info(f"[{self.name}] RendezvousHash initialized with {len(self._nodes)} nodes")

    # --------------------------------------------------------------------------
    # POOL MUTATION
    # --------------------------------------------------------------------------

    def add(self, node):
        """
        Menambahkan node ke pool.
        Mengembalikan True jika node baru, False jika sudah ada.
        """
        start_time = time.time()
        with self._write_lock:
            if node in self._nodes:
                logging.debug(f"[{self.name}] Node {node!r} already in pool")
                increment_counter("selector_add_noop")
                return False

            self._nodes = self._nodes | {node}
            pool_size = len(self._nodes)
            increment_counter("selector_node_added")
            record_latency("selector_add", start_time)

        logging.info(f"[{self.name}] Added node {node!r} (pool size {pool_size})")
        return True

    def remove(self, node):
        """
        Menghapus node dari pool.
        Key milik node ini akan tersebar merata ke node yang tersisa.
        Mengembalikan True jika node sebelumnya ada di pool.
        """
        start_time = time.time()
        with self._write_lock:
            if node not in self._nodes:
                logging.debug(f"[{self.name}] Node {node!r} not in pool, nothing to remove")
                increment_counter("selector_remove_noop")
                return False

            self._nodes = self._nodes - {node}
            pool_size = len(self._nodes)
            increment_counter("selector_node_removed")
            record_latency("selector_remove", start_time)

        logging.info(f"[{self.name}] Removed node {node!r} (pool size {pool_size})")
        return True

    # --------------------------------------------------------------------------
    # LOOKUP
    # --------------------------------------------------------------------------

    def score(self, key, node):
        """Bobot HRW untuk satu pasangan (key, node)."""
        return self.hash_function(self.key_funnel(key) + self.node_funnel(node))

    def get(self, key):
        """
        Mendapatkan node yang bertanggung jawab atas key.
        Mengembalikan None jika pool kosong.
        """
        return self._select(self._nodes, key)

    def get_ranked(self, key, count=None):
        """
        Semua node diurutkan dari skor tertinggi untuk key ini.
        Elemen pertama selalu sama dengan get(key). Berguna untuk menaruh replika.
        """
        if count is not None and count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        nodes = self._nodes
        key_bytes = self.key_funnel(key)
        scored = []
        for node in nodes:
            node_bytes = self.node_funnel(node)
            scored.append((self.hash_function(key_bytes + node_bytes), node_bytes, node))

        scored.sort(key=lambda entry: (entry[0], entry[1]), reverse=True)
        ranked = [node for _, _, node in scored]
        return ranked if count is None else ranked[:count]

    def assignments(self, keys):
        """Memetakan banyak key sekaligus terhadap satu snapshot pool yang sama."""
        nodes = self._nodes
        if not nodes:
            return {}
        return {key: self._select(nodes, key) for key in keys}

    def _select(self, nodes, key):
        if not nodes:
            logging.debug(f"[{self.name}] No node available for key {key!r}: pool is empty")
            increment_counter("selector_empty_pool_get")
            return None

        key_bytes = self.key_funnel(key)
        winner = None
        high_score = None
        winner_bytes = None
        for node in nodes:
            node_bytes = self.node_funnel(node)
            score = self.hash_function(key_bytes + node_bytes)
            # Skor sama: encoding node yang lebih besar menang, tidak tergantung urutan iterasi
            if (high_score is None or score > high_score
                    or (score == high_score and node_bytes > winner_bytes)):
                winner, high_score, winner_bytes = node, score, node_bytes

        return winner

    # --------------------------------------------------------------------------
    # STATUS
    # --------------------------------------------------------------------------

    @property
    def nodes(self):
        """Snapshot pool saat ini (immutable)."""
        return self._nodes

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, node):
        return node in self._nodes

    def get_status(self):
        """Mengembalikan status selector saat ini."""
        return {
            "name": self.name,
            "size": len(self._nodes),
            "nodes": sorted(self._nodes, key=self.node_funnel),
        }
