from .csv import MAX_BATCH_SIZE, MAX_CSV_UPLOAD_BYTES, DraftRow, import_drafts_from_csv

__all__ = ["DraftRow", "MAX_BATCH_SIZE", "MAX_CSV_UPLOAD_BYTES", "import_drafts_from_csv"]
