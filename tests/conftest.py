"""Test configuration and fixtures for dirtree."""

import os

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def proj(tmp_path):
    """Create the small project used throughout the tests.

    proj/
        a/          (empty)
        b.txt
        .git/HEAD   (skipped by default)
    """
    root = tmp_path / "proj"
    (root / "a").mkdir(parents=True)
    (root / "b.txt").write_text("b")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return root


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip the test when the platform/user cannot create symlinks."""
    probe = tmp_path / "symlink-probe"
    try:
        os.symlink(tmp_path, probe)
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    probe.unlink()
    return True


@pytest.fixture
def undecodable_names_supported(tmp_path):
    """Skip the test when file names that are not valid UTF-8 cannot be created."""
    if os.name == "nt":
        pytest.skip("File names are Unicode on Windows")
    probe = os.path.join(os.fsencode(tmp_path), b"probe-\xff")
    try:
        open(probe, "wb").close()
    except OSError:
        pytest.skip("Filesystem rejects file names that are not valid UTF-8")
    os.remove(probe)
    return True
