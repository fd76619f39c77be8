# rendezvous/utils/metrics.py
import threading
import time
from collections import defaultdict

# Implementasi sederhana untuk metrik
metrics_data = defaultdict(lambda: {"count": 0, "total_time": 0.0, "value": 0})
# Satu lock untuk semua selector: add/remove dari instance berbeda memakai lock
# tulis yang berbeda, jadi update ke metrics_data perlu dilindungi di sini.
_metrics_lock = threading.Lock()

def record_latency(metric_name, start_time):
    """Mencatat latensi untuk sebuah operasi."""
    duration = time.time() - start_time
    with _metrics_lock:
        metrics_data[metric_name]["count"] += 1
        metrics_data[metric_name]["total_time"] += duration

def increment_counter(metric_name, value=1):
    """Menambah nilai sebuah counter."""
    with _metrics_lock:
        metrics_data[metric_name]["value"] += value

def reset_metrics():
    """Mengosongkan semua metrik (dipakai oleh tes dan benchmark)."""
    with _metrics_lock:
        metrics_data.clear()

def get_metrics():
    """Mendapatkan metrik yang terkumpul."""
    with _metrics_lock:
        snapshot = {name: dict(data) for name, data in metrics_data.items()}

    report = {}
    for name, data in snapshot.items():
        if data["count"] > 0: # Ini metrik latensi
            avg_latency = data["total_time"] / data["count"]
            report[name] = {
                "requests_count": data["count"],
                "average_latency_ms": avg_latency * 1000
            }
        elif data["value"] > 0: # Ini metrik counter
             report[name] = {"count": data["value"]}

    # Hitung churn pool: total node yang benar-benar ditambah atau dihapus
    added = snapshot.get("selector_node_added", {}).get("value", 0)
    removed = snapshot.get("selector_node_removed", {}).get("value", 0)
    report["pool_churn"] = added + removed

    return report
