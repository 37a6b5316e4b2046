def normalize_text(s: str) -> str:
    # toast/message regions sometimes carry nbsp and trailing newlines
    return (s or "").replace("\u00a0", " ").replace("\n", " ").strip()
