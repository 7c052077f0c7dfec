"""
データモデル定義

photo-cleanupで使用するデータクラスを定義します。
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class CleanMode(Enum):
    """削除モード"""
    ORPHANED = 'orphaned'  # RAWが存在しないJPEGを削除
    MATCHED = 'matched'    # RAWが存在するJPEGを削除


@dataclass
class ScanResult:
    """JPEGスキャン結果"""
    files: List[Path]
    skipped: int = 0  # 走査中にエラーでスキップしたエントリ数


@dataclass(frozen=True)
class MatchResult:
    """マッチング結果"""
    jpeg_path: Path
    raw_path: Optional[Path]
    
    @property
    def is_matched(self) -> bool:
        return self.raw_path is not None


@dataclass
class DeletionPlan:
    """削除計画"""
    mode: CleanMode
    files: List[Path]
    total: int
    matched: int
    unmatched: int


@dataclass
class RunResult:
    """削除結果"""
    deleted: int = 0
    errors: List[Tuple[Path, str]] = field(default_factory=list)
    
    @property
    def failed(self) -> int:
        return len(self.errors)


@dataclass
class CleanConfig:
    """実行設定"""
    raw_root: Path
    compressed_root: Path
    mode: CleanMode
    dry_run: bool = False
    verbose: bool = False
    summary_only: bool = False
    log_file: Optional[Path] = None
