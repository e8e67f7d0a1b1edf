"""
导出登记器 - Export Builder

按可见性（公开 / 测试私有 / 客户端）登记函数，并可指定一个主构造器，
最后组装出模块的唯一导出对象。
Register functions by visibility (public / test-only / client) plus an
optional primary constructor, then assemble the module's single export object.

用法 Usage::

    exporter = ExportBuilder()

    @exporter.register_public
    def helper(): ...

    @exporter.primary
    class Widget: ...

    Widget = exporter.assemble()   # Widget.helper is helper
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar

from ..config import ExporterSettings
from ..schemas import ExportManifest, Visibility
from ..trace import trace
from .naming import intrinsic_name, resolve_name
from .surface import RESERVED_BUCKETS, assemble_surface

F = TypeVar("F", bound=Callable[..., Any])


class ExportBuilder:
    def __init__(
        self,
        *,
        strict: Optional[bool] = None,
        settings: Optional[ExporterSettings] = None,
    ):
        self.settings = settings or ExporterSettings.from_env()
        self.strict = self.settings.strict if strict is None else strict
        self.public_entries: Dict[str, Callable] = {}
        self.test_entries: Dict[str, Callable] = {}
        self.client_entries: Dict[str, Callable] = {}
        self.primary_constructor: Optional[Callable] = None

    def _resolve(self, fn: Callable, name: Optional[str], visibility: Visibility) -> Optional[str]:
        prop_name = resolve_name(fn, name)
        if prop_name is None:
            if self.strict:
                raise ValueError(f"cannot register anonymous {visibility} export {fn!r} without a name")
            trace(self.settings, f"dropped unnamed {visibility} export {fn!r}")
        return prop_name

    # === 登记操作 ===

    def register_public(self, fn: F, name: Optional[str] = None) -> F:
        """
        登记公开函数 - Register Public Function

        参数 Parameters:
            fn: 要导出的函数
                Function to export
            name: 可选，导出对象上的属性名，默认取 ``fn.__name__``
                  Optional attribute name on the export object, defaults to ``fn.__name__``

        返回 Returns:
            原函数，便于作为装饰器使用
            The function itself, so it can be used as a decorator
        """
        prop_name = self._resolve(fn, name, "public")
        if prop_name:
            self.public_entries[prop_name] = fn
            trace(self.settings, f"public {prop_name}")
        return fn

    def register_private(self, fn: F, name: Optional[str] = None) -> F:
        """
        登记测试私有函数 - Register Test-only Function

        仅出现在导出对象的 ``__test`` 分组中，不会成为公开属性。
        Only appears under the ``__test`` bucket, never as a public attribute.
        """
        prop_name = self._resolve(fn, name, "private")
        if prop_name:
            self.test_entries[prop_name] = fn
            trace(self.settings, f"private {prop_name}")
        return fn

    def register_client(self, fn: F, name: Optional[str] = None) -> F:
        """
        登记客户端函数 - Register Client-exposed Function

        同时作为公开函数登记，并加入 ``__exportsToClient`` 分组。
        Registered as a public function too, and added to ``__exportsToClient``.
        """
        prop_name = self._resolve(fn, name, "client")
        if prop_name:
            self.register_public(fn, prop_name)
            self.client_entries[prop_name] = fn
            trace(self.settings, f"client {prop_name}")
        return fn

    def set_primary_constructor(self, fn: F) -> F:
        """
        设置主构造器 - Set Primary Constructor

        组装结果即为该类本身，其余公开函数挂在类上。没有声明名称的对象会被忽略，
        重复设置时后者覆盖前者。
        The assembled result is the class itself, with public functions attached to
        it. Objects without a declared name are ignored; a later call replaces an
        earlier one.
        """
        if not callable(fn):
            if self.strict:
                raise TypeError(f"primary constructor must be callable, got {type(fn).__name__}")
            trace(self.settings, f"ignored non-callable primary constructor {fn!r}")
            return fn

        class_name = intrinsic_name(fn)
        if class_name is None:
            if self.strict:
                raise ValueError(f"cannot use anonymous callable {fn!r} as primary constructor")
            trace(self.settings, f"ignored anonymous primary constructor {fn!r}")
            return fn

        previous = self.primary_constructor
        if previous is not None and previous is not fn:
            trace(self.settings, f"primary constructor {intrinsic_name(previous)} replaced by {class_name}")
        self.primary_constructor = fn
        return fn

    set_class = set_primary_constructor

    # === 装饰器形式 ===

    def public(self, name: Optional[str] = None) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            return self.register_public(fn, name)

        return decorator

    def private(self, name: Optional[str] = None) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            return self.register_private(fn, name)

        return decorator

    def client(self, name: Optional[str] = None) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            return self.register_client(fn, name)

        return decorator

    def primary(self, fn: F) -> F:
        return self.set_primary_constructor(fn)

    # === 组装 ===

    def manifest(self) -> ExportManifest:
        """描述 assemble() 将产生的导出对象，不执行组装"""
        primary = self.primary_constructor
        public = sorted(n for n in self.public_entries if n not in RESERVED_BUCKETS)
        return ExportManifest(
            kind="constructible" if primary is not None else "plain",
            primary=intrinsic_name(primary) if primary is not None else None,
            public=public,
            test=sorted(self.test_entries),
            client=sorted(self.client_entries),
        )

    def assemble(self) -> Any:
        """
        组装导出对象 - Assemble Export Object

        返回 Returns:
            设置了主构造器时返回该类本身，否则返回 ExportNamespace；
            两者都带有 ``__test`` 与 ``__exportsToClient`` 分组
            The primary constructor itself when set, otherwise an ExportNamespace;
            both carry the ``__test`` and ``__exportsToClient`` buckets
        """
        exports = assemble_surface(
            self.public_entries,
            self.test_entries,
            self.client_entries,
            self.primary_constructor,
        )
        trace(
            self.settings,
            f"assembled {len(self.public_entries)} public, {len(self.test_entries)} private, "
            f"{len(self.client_entries)} client exports",
        )
        return exports

    get_exports = assemble
