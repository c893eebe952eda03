from pathlib import Path

class logging:
    root: Path = Path(__file__).parent/'logs'/'prod'
