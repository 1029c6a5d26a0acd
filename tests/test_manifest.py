from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rinit.templates import (
    PROJECT_DIRECTORIES,
    FileOperation,
    Manifest,
    build_manifest,
    list_variants,
    resolve_operations,
)


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def ops_by_target(manifest: Manifest) -> dict[str, FileOperation]:
    return {op.target: op for op in manifest.operations}


def test_directories_are_fixed(template_root: Path, tmp_path: Path) -> None:
    bare = tmp_path / "bare"
    (bare / "metadata").mkdir(parents=True)

    assert len(PROJECT_DIRECTORIES) == 15
    assert build_manifest(template_root, "demo", "en").directories == PROJECT_DIRECTORIES
    assert build_manifest(bare, "other", "zh").directories == PROJECT_DIRECTORIES


def test_variant_metadata_is_added_once(template_root: Path) -> None:
    manifest = build_manifest(template_root, "demo", "en")

    metadata_ops = [op for op in manifest.operations if op.target == "_metadata.yml"]
    assert len(metadata_ops) == 1
    assert metadata_ops[0].source == template_root / "metadata" / "metadata_en.yml"
    assert manifest.warnings == ()
    assert manifest.variant == "en"


def test_missing_variant_warns_and_continues(template_root: Path, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        manifest = build_manifest(template_root, "demo", "fr")

    assert "_metadata.yml" not in manifest.targets
    assert len(manifest.warnings) == 1
    assert "fr" in manifest.warnings[0]
    assert "Metadata file for variant 'fr' not found" in caplog.text
    assert {"R/main.R", "README.md", ".gitignore"} <= set(manifest.targets)


def test_metadata_dir_is_not_copied(template_root: Path) -> None:
    write_file(template_root / "metadata" / "metadata_zh.yml", "lang: zh\n")

    targets = build_manifest(template_root, "demo", "en").targets

    assert not any(t.startswith("metadata/") for t in targets)


def test_gitignore_becomes_dotfile(template_root: Path) -> None:
    write_file(template_root / "R" / "gitignore", "nested\n")

    ops = ops_by_target(build_manifest(template_root, "demo", "en"))

    assert ".gitignore" in ops
    assert "gitignore" not in ops
    assert ops[".gitignore"].source == template_root / "gitignore"
    # Only the top-level file is renamed.
    assert "R/gitignore" in ops


def test_only_readme_gets_a_transform(template_root: Path) -> None:
    ops = ops_by_target(build_manifest(template_root, "demo", "en"))

    assert ops["README.md"].transform is not None
    assert ops["R/main.R"].transform is None
    assert ops[".gitignore"].transform is None
    assert ops["_metadata.yml"].transform is None


def test_operations_are_in_stable_order(template_root: Path) -> None:
    manifest = build_manifest(template_root, "demo", "en")

    assert manifest.targets == ["R/main.R", "README.md", ".gitignore", "_metadata.yml"]


def test_resolve_operations_applies_transform(template_root: Path) -> None:
    manifest = build_manifest(template_root, "demo", "en")

    resolved = {op.target: op for op in resolve_operations(manifest)}

    readme = resolved["README.md"]
    assert readme.source is None
    assert readme.content == "# demo\n\nWelcome to demo.\nRun demo with R.\n"
    assert resolved["R/main.R"].source == template_root / "R" / "main.R"
    assert resolved["R/main.R"].content is None
    # The manifest itself is left untouched.
    assert ops_by_target(manifest)["README.md"].source is not None


def test_file_operation_rejects_source_and_content(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        FileOperation(target="a", source=tmp_path / "a", content="x")
    with pytest.raises(ValueError):
        FileOperation(target="a")


def test_manifest_rejects_duplicate_targets(tmp_path: Path) -> None:
    op = FileOperation(target="a", source=tmp_path / "a")
    with pytest.raises(ValueError, match="Duplicate target"):
        Manifest(variant="en", operations=(op, op))


def test_list_variants(template_root: Path) -> None:
    write_file(template_root / "metadata" / "metadata_zh.yml", "lang: zh\n")
    write_file(template_root / "metadata" / "notes.txt", "ignored\n")

    assert list_variants(template_root) == ["en", "zh"]
