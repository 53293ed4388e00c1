import os


class Core:
    def __init__(self, settings: dict | None = None) -> None:
        discord_cfg = (settings or {}).get("discord", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))

        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)
        self.STORE_CHANNEL_ID: int = int(
            discord_cfg.get("channel_id") or os.getenv("STORE_CHANNEL_ID", "0")
        )

        required = [
            (token_env, self.DISCORD_API_TOKEN),
            ("STORE_CHANNEL_ID", self.STORE_CHANNEL_ID),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")
