# Path: image_metrics/tests/test_build_output_locator.py
"""
Unit tests for build output discovery.

Tests:
- Single directory / single report is found (case-insensitive suffixes)
- Zero or several matches fail at the right level
"""

import pytest

from image_metrics.exceptions import BuildOutputNotFoundError, BuildOutputLoadError
from image_metrics.loaders.build_output_locator import (
    BuildOutputLocator,
    LEVEL_BUILD_DIRECTORY,
    LEVEL_BUILD_OUTPUT,
    locate_build_output,
)


def test_locates_single_report(project):
    report = project.write_report()

    assert BuildOutputLocator().locate() == report


def test_locate_uses_explicit_working_dir(project, tmp_path, monkeypatch):
    report = project.write_report()
    monkeypatch.chdir(tmp_path.parent)

    assert locate_build_output(tmp_path) == report


def test_suffix_match_is_case_insensitive(project):
    image_dir = project.root / 'target' / 'App-1.0-Native-Image-Source-JAR'
    report = project.write_report(name='App-Runner-Build-Output-Stats.JSON', image_dir=image_dir)

    assert BuildOutputLocator().locate() == report


def test_unrelated_entries_are_ignored(project):
    report = project.write_report()
    (project.root / 'target' / 'classes').mkdir()
    (project.root / 'target' / 'app-1.0-runner.jar').write_bytes(b'')
    (project.image_dir / 'app-1.0-runner.jar').write_bytes(b'')
    (project.image_dir / 'build-output-stats.json.bak').write_text('{}')

    assert BuildOutputLocator().locate() == report


def test_missing_target_directory_fails(project):
    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate()

    assert excinfo.value.level == LEVEL_BUILD_DIRECTORY
    assert 'Could not identify the native image build directory' in str(excinfo.value)


def test_no_native_image_directory_fails(project):
    (project.root / 'target' / 'classes').mkdir(parents=True)

    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate()

    assert excinfo.value.level == LEVEL_BUILD_DIRECTORY
    assert excinfo.value.candidates == []


def test_two_native_image_directories_fail(project):
    project.write_report()
    second = project.root / 'target' / 'other-native-image-source-jar'
    project.write_report(image_dir=second)

    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate()

    assert excinfo.value.level == LEVEL_BUILD_DIRECTORY
    assert len(excinfo.value.candidates) == 2


def test_file_named_like_directory_is_not_a_candidate(project):
    (project.root / 'target').mkdir()
    (project.root / 'target' / 'app-native-image-source-jar').write_text('')

    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate_build_directory()

    assert excinfo.value.level == LEVEL_BUILD_DIRECTORY


def test_no_report_fails_at_output_level(project):
    project.image_dir.mkdir(parents=True)

    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate()

    assert excinfo.value.level == LEVEL_BUILD_OUTPUT
    assert 'Could not identify the native image build output' in str(excinfo.value)


def test_two_reports_fail_at_output_level(project):
    project.write_report()
    project.write_report(name='second-build-output-stats.json')

    with pytest.raises(BuildOutputNotFoundError) as excinfo:
        BuildOutputLocator().locate()

    assert excinfo.value.level == LEVEL_BUILD_OUTPUT
    assert len(excinfo.value.candidates) == 2


def test_discovery_failure_is_an_assertion_not_a_load_error(project):
    with pytest.raises(AssertionError) as excinfo:
        BuildOutputLocator().locate()

    assert not isinstance(excinfo.value, BuildOutputLoadError)


def test_build_dir_is_configurable(project, monkeypatch):
    monkeypatch.setenv('IMAGE_METRICS_BUILD_DIR', 'build')
    image_dir = project.root / 'build' / 'app-native-image-source-jar'
    report = project.write_report(image_dir=image_dir)

    assert BuildOutputLocator().locate() == report
