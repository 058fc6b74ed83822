from dataclasses import dataclass


@dataclass(slots=True)
class ScannerConfig:
    nested_block_comments: bool = True
