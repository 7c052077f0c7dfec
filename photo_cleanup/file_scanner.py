"""
ファイルスキャナー

圧縮画像ディレクトリを再帰的にスキャンしてJPEGファイルを検索する機能を提供します。
"""

import logging
import os
from pathlib import Path
from typing import Set

from .models import ScanResult
from .path_validator import PathValidator


class FileScanner:
    """ディレクトリをスキャンしてJPEGファイルを検索するクラス"""
    
    # JPEG拡張子（小文字で比較）
    JPEG_EXTENSIONS: Set[str] = {'.jpg', '.jpeg'}
    
    def __init__(self):
        """FileScannerを初期化"""
        self.logger = logging.getLogger(__name__)
    
    def scan_jpeg_files(self, directory: Path) -> ScanResult:
        """
        ディレクトリを再帰的にスキャンしてJPEGファイルを検索
        
        シンボリックリンクは辿る。読み取れないディレクトリや走査中に
        消えたエントリはスキップし、その件数だけを記録する。
        
        Args:
            directory: スキャンするディレクトリ
        
        Returns:
            見つかったJPEGファイル（走査順）とスキップ件数
        
        Raises:
            ValidationError: ディレクトリが無効な場合
        """
        PathValidator.validate_directory(directory)
        
        jpeg_files = []
        skipped = 0
        
        def on_error(error: OSError) -> None:
            nonlocal skipped
            skipped += 1
            self.logger.debug(f"走査エラーをスキップ: {error}")
        
        for dir_path, dir_names, file_names in os.walk(directory, onerror=on_error, followlinks=True):
            # 同じツリーに対して同じ順序で報告する
            dir_names.sort()
            for file_name in sorted(file_names):
                file_path = Path(dir_path) / file_name
                if not self.is_jpeg_file(file_path):
                    continue
                try:
                    if not file_path.is_file():
                        continue
                except OSError as e:
                    on_error(e)
                    continue
                jpeg_files.append(file_path)
        
        self.logger.debug(f"JPEGスキャン完了: {len(jpeg_files)}個 (スキップ: {skipped}個)")
        return ScanResult(files=jpeg_files, skipped=skipped)
    
    def is_jpeg_file(self, file_path: Path) -> bool:
        """
        ファイルがJPEGファイルかどうかを判定（大文字小文字を区別しない）
        
        Args:
            file_path: ファイルパス
        
        Returns:
            JPEGファイルの場合True
        """
        return file_path.suffix.lower() in self.JPEG_EXTENSIONS
