#!/usr/bin/env python3
"""Invoke tasks for lut-studio project automation."""

import shutil
from pathlib import Path

from invoke.context import Context
from invoke.tasks import task

PACKAGE = "lut_studio"


@task
def clean(_: Context) -> None:
    """Clean build artifacts and cache files."""
    print("🧹 Cleaning build artifacts and cache files...")

    for pattern in ["build", "dist", "*.egg-info", "htmlcov", "coverage.xml"]:
        for path in Path(".").glob(pattern):
            print(f"  Removing: {path}")
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            else:
                path.unlink(missing_ok=True)

    for pattern in ["__pycache__", ".pytest_cache", ".ruff_cache"]:
        for path in Path(".").glob(f"**/{pattern}"):
            shutil.rmtree(path, ignore_errors=True)

    print("✅ Clean completed")


@task
def format(ctx: Context) -> None:
    """Format code with ruff."""
    print("🎨 Formatting code with ruff...")
    ctx.run("ruff format src tests")
    print("✅ Code formatting completed")


@task
def lint(ctx: Context, fix: bool = False) -> None:
    """Run linting with ruff.

    Args:
        fix: Automatically fix fixable issues (default: False)
    """
    print("🔍 Linting code with ruff...")
    cmd = "ruff check src tests"
    if fix:
        cmd += " --fix"
    ctx.run(cmd)
    print("✅ Linting completed")


@task
def typecheck(ctx: Context) -> None:
    """Run type checking with pyright."""
    print("🔬 Type checking with pyright...")
    ctx.run(f"pyright src/{PACKAGE}")
    print("✅ Type checking completed")


@task
def spell(ctx: Context) -> None:
    """Run spell checking with codespell."""
    print("📝 Spell checking with codespell...")
    ctx.run("codespell src tests")
    print("✅ Spell checking completed")


@task
def security(ctx: Context) -> None:
    """Run security analysis with bandit."""
    print("🔒 Running security analysis with bandit...")
    ctx.run(f"bandit -r src/{PACKAGE}")
    print("✅ Bandit analysis completed")


@task
def test(ctx: Context, coverage: bool = True, verbose: bool = False) -> None:
    """Run tests with pytest.

    Args:
        coverage: Generate coverage report (default: True)
        verbose: Run with verbose output (default: False)
    """
    print("🧪 Running tests with pytest...")

    cmd = "pytest"
    if coverage:
        cmd += f" --cov={PACKAGE} --cov-report=term-missing --cov-report=xml"
    if verbose:
        cmd += " -v"

    ctx.run(cmd + " tests")
    print("✅ Tests completed")


@task(pre=[format, lint, typecheck, spell, security])
def quality(_: Context) -> None:
    """Run code quality checks. Does NOT run tests."""
    print("🎯 Quality checks completed successfully!")


@task(pre=[clean])
def build(ctx: Context) -> None:
    """Build the package for distribution."""
    print("🔨 Building package...")
    ctx.run("uv build")
    for file in sorted(Path("dist").glob("*")):
        print(f"  {file.name} ({file.stat().st_size / 1024:.1f}K)")
    print("✅ Build completed")


@task
def install(ctx: Context, dev: bool = False) -> None:
    """Install the package in editable mode.

    Args:
        dev: Install with development dependencies (default: False)
    """
    print("📥 Installing package...")
    ctx.run("uv sync --extra dev" if dev else "uv pip install -e .")
    print("✅ Installation completed")


@task
def demo(ctx: Context) -> None:
    """Generate a LUT and apply it to a synthetic test image."""
    print("🎬 Running package demo...")
    ctx.run("python docs/examples/basic_usage.py")
    print("✅ Demo completed")


@task
def all(ctx: Context) -> None:
    """Run complete pipeline: clean, quality checks, tests, and build."""
    print("🎯 Running complete pipeline...")
    clean(ctx)
    quality(ctx)
    test(ctx)
    build(ctx)
    print("🎉 Complete pipeline finished successfully!")
