"""
マッチング処理モジュール

JPEGファイルに対応するRAWファイルを、圧縮画像ルートからの相対パスを
RAWルート側に写して検索します。内容の比較は行わず、ディレクトリ構成と
ベース名が両ツリーで一致していることを前提とします。
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .models import MatchResult

# RAW拡張子（優先順位順）。各拡張子は小文字、大文字の順に確認する
RAW_EXTENSIONS: Tuple[Tuple[str, Tuple[str, str]], ...] = tuple(
    (ext, (ext.lower(), ext.upper()))
    for ext in (
        'raf',  # Fujifilm
        'cr2',  # Canon
        'cr3',  # Canon
        'nef',  # Nikon
        'arw',  # Sony
        'dng',  # Adobe/Leica
        'orf',  # Olympus
        'rw2',  # Panasonic
        'raw',  # 汎用
    )
)


class Matcher:
    """JPEGファイルとRAWファイルをマッチングするクラス"""
    
    def __init__(self, compressed_root: Path, raw_root: Path):
        """
        Matcherを初期化
        
        Args:
            compressed_root: JPEGファイルのルートディレクトリ
            raw_root: RAWファイルのルートディレクトリ
        """
        self.compressed_root = compressed_root
        self.raw_root = raw_root
        self.logger = logging.getLogger(__name__)
    
    def match_all(self, jpeg_files: List[Path], progress_logger=None) -> List[MatchResult]:
        """
        JPEGファイルごとに対応するRAWファイルを検索
        
        Args:
            jpeg_files: マッチング対象のJPEGファイルパスのリスト（順序は保持）
            progress_logger: 進捗ロガー（ファイルごとのMATCH/NO_MATCH表示用）
        
        Returns:
            マッチング結果のリスト
        """
        results = []
        
        for jpeg_path in jpeg_files:
            raw_path = self.find_raw_match(jpeg_path)
            results.append(MatchResult(jpeg_path=jpeg_path, raw_path=raw_path))
            
            if progress_logger:
                progress_logger.log_match_result(jpeg_path, raw_path)
        
        return results
    
    def find_raw_match(self, jpeg_path: Path) -> Optional[Path]:
        """
        JPEGファイルに対応するRAWファイルを検索
        
        Args:
            jpeg_path: JPEGファイルの絶対パス
        
        Returns:
            最初に見つかったRAWファイルのパス（見つからない場合はNone）
        """
        try:
            relative = jpeg_path.relative_to(self.compressed_root)
        except ValueError:
            self.logger.debug(f"圧縮画像ルート外のファイル: {jpeg_path}")
            return None
        
        raw_dir = self.raw_root / relative.parent
        if not self._exists(raw_dir):
            self.logger.debug(f"RAWディレクトリなし: {raw_dir}")
            return None
        
        stem = jpeg_path.stem
        for _, variants in RAW_EXTENSIONS:
            for variant in variants:
                candidate = raw_dir / f"{stem}.{variant}"
                if self._exists(candidate):
                    self.logger.debug(f"マッチ発見: {jpeg_path.name} -> {candidate.name}")
                    return candidate
        
        self.logger.debug(f"マッチなし: {jpeg_path.name}")
        return None
    
    def _exists(self, path: Path) -> bool:
        """
        パスの存在を確認（アクセスできないパスは存在しないものとして扱う）
        
        Args:
            path: 確認するパス
        
        Returns:
            存在する場合True
        """
        try:
            return path.exists()
        except OSError as e:
            self.logger.debug(f"存在確認エラー（存在しないものとして扱う）: {path} - {e}")
            return False
