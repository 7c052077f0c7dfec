"""
コマンドラインインターフェース

photo-cleanupのメインエントリーポイントです。
argparseのサブコマンド機能を使用して、clean、clean-matchedコマンドを提供します。

終了コード:
  0: 正常終了（ドライランを含む）
  1: 入力エラーまたは処理エラー
  3: 一部のファイルの削除に失敗
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .clean_manager import CleanManager
from .exceptions import ProcessingError, ValidationError
from .models import CleanConfig, CleanMode
from .path_validator import PathValidator

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARTIAL_FAILURE = 3

_TRUE_VALUES = {'true', 'yes', 'on', '1'}
_FALSE_VALUES = {'false', 'no', 'off', '0'}


def parse_bool(value: str) -> bool:
    """--dry に渡された真偽値文字列を解釈"""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"真偽値ではありません: {value}")


def _add_clean_arguments(parser: argparse.ArgumentParser) -> None:
    """clean / clean-matched 共通の引数を追加"""
    parser.add_argument(
        '--raw', '-r',
        type=str,
        required=True,
        help='RAWファイルのルートディレクトリパス'
    )
    parser.add_argument(
        '--compressed', '-c',
        type=str,
        required=True,
        help='JPEGファイルのルートディレクトリパス'
    )
    parser.add_argument(
        '--dry',
        type=parse_bool,
        nargs='?',
        const=True,
        default=False,
        metavar='BOOL',
        help='ドライラン（削除予定のファイルを表示するだけで削除しない）'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='ファイルごとのMATCH/NO_MATCHと削除結果を表示'
    )
    parser.add_argument(
        '--summary-only',
        action='store_true',
        help='ファイルごとの表示を抑制し、件数のみ表示（--verboseより優先）'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='詳細ログを書き出すファイルパス'
    )


def create_parser() -> argparse.ArgumentParser:
    """
    コマンドライン引数パーサーを作成
    
    Returns:
        設定済みのArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='photo-cleanup',
        description='RAWファイルの有無に応じて圧縮画像ディレクトリのJPEGファイルを削除するツール',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # RAWファイルが存在しないJPEGファイルを削除
  photo-cleanup clean --raw /path/to/raw --compressed /path/to/jpeg
  
  # RAWファイルが存在するJPEGファイルを削除
  photo-cleanup clean-matched --raw /path/to/raw --compressed /path/to/jpeg

詳細については各サブコマンドのヘルプを参照してください:
  photo-cleanup <command> --help
        """
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    
    subparsers = parser.add_subparsers(
        dest='command',
        help='利用可能なコマンド',
        metavar='<command>'
    )
    
    clean_parser = subparsers.add_parser(
        'clean',
        help='RAWファイルが存在しないJPEGファイルを削除',
        description='圧縮画像ディレクトリ内のJPEGファイルのうち、RAWディレクトリの同じ相対パスに'
                    '対応するRAWファイルが存在しないものを削除します。',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # 削除予定のファイルを確認
  photo-cleanup clean -r /path/to/raw -c /path/to/jpeg --dry
  
  # ファイルごとの結果を表示しながら削除
  photo-cleanup clean -r /path/to/raw -c /path/to/jpeg --verbose
        """
    )
    _add_clean_arguments(clean_parser)
    
    matched_parser = subparsers.add_parser(
        'clean-matched',
        help='RAWファイルが存在するJPEGファイルを削除',
        description='圧縮画像ディレクトリ内のJPEGファイルのうち、RAWディレクトリの同じ相対パスに'
                    '対応するRAWファイルが存在するものを削除します。',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # 件数のみ確認
  photo-cleanup clean-matched -r /path/to/raw -c /path/to/jpeg --dry --summary-only
        """
    )
    _add_clean_arguments(matched_parser)
    
    return parser


def build_config(args, mode: CleanMode) -> CleanConfig:
    """解析済みの引数から実行設定を作成"""
    return CleanConfig(
        raw_root=PathValidator.normalize_path(args.raw),
        compressed_root=PathValidator.normalize_path(args.compressed),
        mode=mode,
        dry_run=args.dry,
        verbose=args.verbose,
        summary_only=args.summary_only,
        log_file=PathValidator.normalize_path(args.log_file) if args.log_file else None
    )


def handle_clean_command(args, mode: CleanMode) -> int:
    """
    clean / clean-matchedコマンドを処理
    
    Args:
        args: 解析されたコマンドライン引数
        mode: 削除モード
    
    Returns:
        終了コード
    """
    try:
        config = build_config(args, mode)
        
        result = CleanManager().run(config)
        
        if result.errors:
            return EXIT_PARTIAL_FAILURE
        return EXIT_OK
    
    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ProcessingError as e:
        print(f"❌ 処理エラー: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(f"❌ 予期しないエラー: {e}", file=sys.stderr)
        return EXIT_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    """
    メインエントリーポイント
    
    Args:
        argv: コマンドライン引数（省略時はsys.argv）
    
    Returns:
        終了コード
    """
    parser = create_parser()
    
    if argv is None:
        argv = sys.argv[1:]
    
    # 引数が指定されていない場合はヘルプを表示
    if not argv:
        parser.print_help()
        return EXIT_OK
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return EXIT_OK
    
    if args.command == 'clean':
        return handle_clean_command(args, CleanMode.ORPHANED)
    elif args.command == 'clean-matched':
        return handle_clean_command(args, CleanMode.MATCHED)
    else:
        print(f"❌ 不明なコマンド: {args.command}", file=sys.stderr)
        parser.print_help()
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
