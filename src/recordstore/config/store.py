import os


class Store:
    def __init__(self, settings: dict | None = None) -> None:
        store_cfg = (settings or {}).get("store", {})
        self.MAX_CONTENT_LENGTH: int = int(
            store_cfg.get("max_content_length", os.getenv("MAX_CONTENT_LENGTH", "2000"))
        )
        self.MAX_ATTACHMENT_MB: int = int(
            store_cfg.get("max_attachment_mb", os.getenv("MAX_ATTACHMENT_MB", "25"))
        )
        self.ATTACHMENT_FILENAME: str = str(
            store_cfg.get("attachment_filename", os.getenv("ATTACHMENT_FILENAME", "data"))
        )
        self.DOWNLOAD_TIMEOUT_S: float = float(
            store_cfg.get("download_timeout_s", os.getenv("DOWNLOAD_TIMEOUT_S", "60"))
        )

    @property
    def max_attachment_bytes(self) -> int:
        return self.MAX_ATTACHMENT_MB * 1024 * 1024
