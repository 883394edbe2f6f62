import importlib


def test_srcmap_package_exports():
    module = importlib.import_module("srcmap")
    assert hasattr(module, "PathMappingList")
    assert hasattr(module, "normalize_path")
    assert hasattr(module, "RemapCache")
    assert hasattr(module, "SourceResolver")
    assert hasattr(module, "load_mappings")
    assert module.__version__.startswith("0.")


def test_srcmap_dbg_package_exports_main():
    module = importlib.import_module("srcmap_dbg")
    assert callable(module.main)
