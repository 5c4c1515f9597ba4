import os, csv, logging
from datetime import datetime, timezone
from ..config import settings

logger = logging.getLogger("splmint")
logging.basicConfig(
    level=getattr(logging, settings.logging.level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
def _ensure_dir(path: str): os.makedirs(path, exist_ok=True)
def log_tx(record: dict, *, fname_csv: str = "transactions.csv"):
    """Append a submitted transaction to the CSV journal when journaling is enabled."""
    if not settings.logging.journal: return
    out_dir = settings.logging.out_dir; _ensure_dir(out_dir)
    ts = datetime.now(timezone.utc).isoformat(); rec = {"ts": ts, **record}
    csv_path = os.path.join(out_dir, fname_csv)
    header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rec.keys()))
        if header: w.writeheader()
        w.writerow(rec)
