from __future__ import annotations

import re
from functools import cache, partial
from importlib import import_module
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pkgutil import ModuleInfo

    from pytest import MonkeyPatch


@cache
def _catch_all_autoviv_packages_and_modules() -> list[ModuleInfo]:
    from pkgutil import walk_packages

    autoviv_spec = import_module("autoviv").__spec__

    assert autoviv_spec is not None

    autoviv_paths = autoviv_spec.submodule_search_locations or import_module("autoviv").__path__

    return list(walk_packages(autoviv_paths, prefix=f"{autoviv_spec.name}."))


ALL_AUTOVIV_MODULES = [info.name for info in _catch_all_autoviv_packages_and_modules()]


def unload_module(module_name: str, monkeypatch: MonkeyPatch) -> None:
    import sys

    monkeypatch.delitem(sys.modules, module_name, raising=False)
    pattern = r"{}(?:\.\w+)+".format(re.escape(module_name))
    for module in filter(partial(re.fullmatch, pattern), tuple(sys.modules)):
        monkeypatch.delitem(sys.modules, module, raising=False)


@pytest.mark.functional
class TestGlobalImport:
    @pytest.fixture(autouse=True)
    @staticmethod
    def unload_autoviv(monkeypatch: MonkeyPatch) -> None:
        return unload_module("autoviv", monkeypatch=monkeypatch)

    @pytest.mark.parametrize("module_name", ALL_AUTOVIV_MODULES)
    def test____import____successful_import_module_without_circular_import(self, module_name: str) -> None:
        import sys

        # Simple check to ensure the unload_autoviv fixture does its job
        assert not any(n == "autoviv" or n.startswith("autoviv.") for n in tuple(sys.modules))

        import_module(module_name)

        assert module_name in sys.modules


@pytest.mark.functional
class TestDunderAll:
    @pytest.mark.parametrize("module_name", ALL_AUTOVIV_MODULES)
    def test____dunder_all____is_conform(self, module_name: str) -> None:
        # Arrange
        module = import_module(module_name)
        module_namespace = vars(module)
        try:
            __all_module__: list[str] = module.__all__
        except AttributeError:
            pytest.fail(f"{module_name!r} does not define __all__ variable")
        if sorted(set(__all_module__)) != sorted(__all_module__):
            pytest.fail(f"{module_name!r}: Duplicates found in __all__")

        # Act
        unknown_names = set(__all_module__) - set(module_namespace)

        # Assert
        assert not unknown_names

    @pytest.mark.parametrize(
        ["package_name", "private_module_name"],
        [
            pytest.param("autoviv.collections", "autoviv.collections._lazydict"),
        ],
    )
    def test____dunder_all____values_from_private_module_retrieved_in_package(
        self,
        package_name: str,
        private_module_name: str,
    ) -> None:
        # Arrange
        package = import_module(package_name)
        private_module = import_module(private_module_name)

        # Act
        missing_names_in_declaration = set(private_module.__all__) - set(package.__all__)

        # Assert
        assert not missing_names_in_declaration
        for name in private_module.__all__:
            assert getattr(package, name) is getattr(private_module, name)
