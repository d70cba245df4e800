from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urlparse, unquote
import json

from kivy.logger import Logger

from WordCards.models.state import WordEntry


class LoadErrorKind(Enum):
    NETWORK_FAILURE = "NetworkFailure"
    EMPTY_BODY = "EmptyBody"
    PARSE_FAILURE = "ParseFailure"
    SCHEMA_MISSING_FIELD = "SchemaMissingField"
    SCHEMA_EMPTY_LIST = "SchemaEmptyList"


class LoadError(Exception):
    def __init__(self, kind: LoadErrorKind, message: str, *, source: str = "",
                 status: Optional[int] = None, byte_length: Optional[int] = None,
                 position: Optional[int] = None, line: Optional[int] = None,
                 column: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.source = source
        self.status = status
        self.byte_length = byte_length
        self.position = position
        self.line = line
        self.column = column

    def __str__(self):
        return f"{self.kind.value}: {self.message}"

    def diagnostic(self) -> str:
        if self.kind is LoadErrorKind.PARSE_FAILURE:
            lines = [f"JSON格式错误: {self.message}"]
            if self.position is not None:
                lines.append(f"错误位置: 第 {self.position} 个字符 (行 {self.line}, 列 {self.column})")
            lines.append("请使用JSON验证工具检查词汇文件格式。")
        else:
            lines = [f"加载词汇数据失败: {self.message}"]
        status = self.status if self.status is not None else "未知"
        size = f"{self.byte_length} 字节" if self.byte_length is not None else "未知"
        lines += [
            "错误排查步骤:",
            f"1. 检查HTTP状态: {status}",
            "2. 验证JSON结构: 确保文件包含有效的words数组",
            "3. 推荐操作:",
            "- 使用JSON验证工具: https://jsonlint.com",
            f"- 检查文件大小: {size}",
            "- 确认文件编码: 应为UTF-8无BOM格式",
            f"来源: {self.source or '未知'}",
        ]
        return "\n".join(lines)


def parse_words(body: bytes | str, *, source: str = "", status: Optional[int] = None) -> list[WordEntry]:
    raw = body.encode("utf-8") if isinstance(body, str) else bytes(body or b"")
    ctx = dict(source=source, status=status, byte_length=len(raw))

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise LoadError(LoadErrorKind.PARSE_FAILURE, f"文件不是UTF-8编码: {e.reason}", position=e.start, **ctx) from e
    if not text.strip():
        raise LoadError(LoadErrorKind.EMPTY_BODY, "词汇文件内容为空", **ctx)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(LoadErrorKind.PARSE_FAILURE, e.msg, position=e.pos, line=e.lineno, column=e.colno, **ctx) from e

    if not isinstance(data, dict):
        raise LoadError(LoadErrorKind.SCHEMA_MISSING_FIELD, "JSON结构错误: 根节点必须是对象", **ctx)
    items = data.get("words")
    if not isinstance(items, list):
        raise LoadError(LoadErrorKind.SCHEMA_MISSING_FIELD, "JSON结构错误: 缺少words数组或words不是数组类型", **ctx)
    if not items:
        raise LoadError(LoadErrorKind.SCHEMA_EMPTY_LIST, "JSON内容为空: words数组中没有词汇数据", **ctx)

    out = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise LoadError(LoadErrorKind.SCHEMA_MISSING_FIELD, f"JSON结构错误: words[{i}] 不是对象", **ctx)
        try:
            out.append(WordEntry.from_dict(item))
        except ValueError as e:
            raise LoadError(LoadErrorKind.SCHEMA_MISSING_FIELD, f"JSON结构错误: words[{i}] 缺少korean或chinese字段", **ctx) from e
    return out


def is_remote(source: str) -> bool:
    return urlparse(str(source)).scheme in ("http", "https")


def _local_path(source: str) -> Path:
    parsed = urlparse(str(source))
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(source)


def load_words(source: str | Path) -> list[WordEntry]:
    source = str(source)
    path = _local_path(source)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise LoadError(LoadErrorKind.NETWORK_FAILURE, f"无法读取文件: {e.strerror or e}", source=source) from e
    words = parse_words(raw, source=source)
    Logger.info(f"WordCards: {len(words)} Wörter geladen aus {source}")
    return words


def fetch_words(source: str | Path,
                on_loaded: Callable[[list[WordEntry]], None],
                on_failed: Callable[[LoadError], None]):
    """Non-blocking load; exactly one of the callbacks fires, on the main thread."""
    from kivy.clock import Clock
    source = str(source)

    def _fail(err: LoadError):
        Logger.error(f"WordCards: Laden fehlgeschlagen ({err})")
        on_failed(err)

    if not is_remote(source):
        def _read_local(dt):
            try:
                words = load_words(source)
            except LoadError as err:
                _fail(err)
                return
            on_loaded(words)
        return Clock.schedule_once(_read_local, 0)

    from kivy.network.urlrequest import UrlRequest

    def _on_success(req, result):
        try:
            words = parse_words(result or b"", source=source, status=req.resp_status)
        except LoadError as err:
            _fail(err)
            return
        Logger.info(f"WordCards: {len(words)} Wörter geladen aus {source}")
        on_loaded(words)

    def _on_failure(req, result):
        _fail(LoadError(LoadErrorKind.NETWORK_FAILURE, f"HTTP请求失败: {req.resp_status}",
                        source=source, status=req.resp_status,
                        byte_length=len(result) if isinstance(result, (bytes, str)) else None))

    def _on_error(req, error):
        _fail(LoadError(LoadErrorKind.NETWORK_FAILURE, f"网络错误: {error}", source=source))

    return UrlRequest(source, on_success=_on_success, on_failure=_on_failure,
                      on_error=_on_error, decode=False)
