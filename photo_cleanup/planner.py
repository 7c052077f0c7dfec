"""
削除計画モジュール

マッチング結果と削除モードから削除対象のJPEGファイルを選択します。
"""

from typing import List

from .models import CleanMode, DeletionPlan, MatchResult


def build_plan(results: List[MatchResult], mode: CleanMode) -> DeletionPlan:
    """
    削除計画を作成
    
    orphanedモードではRAWが見つからなかったJPEGを、matchedモードでは
    RAWが見つかったJPEGを選択する。発見順は保持される。
    
    Args:
        results: マッチング結果のリスト
        mode: 削除モード
    
    Returns:
        削除計画
    """
    if mode is CleanMode.MATCHED:
        files = [r.jpeg_path for r in results if r.is_matched]
    else:
        files = [r.jpeg_path for r in results if not r.is_matched]
    
    total = len(results)
    matched = sum(1 for r in results if r.is_matched)
    
    return DeletionPlan(
        mode=mode,
        files=files,
        total=total,
        matched=matched,
        unmatched=max(total - matched, 0)
    )
