"""Pytest configuration for animator-wrapper tests."""

import logging

import pytest

from animator_wrapper.codegen import (
    AccessModifier,
    ControllerAsset,
    GeneratorConfig,
    ParameterDescriptor,
    ParameterKind,
)
from animator_wrapper.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests don't leak into each other."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def speed_and_jump():
    """The two-parameter controller used throughout the examples."""
    return (
        ParameterDescriptor("speed", ParameterKind.FLOAT, 123),
        ParameterDescriptor("Jump", ParameterKind.TRIGGER, 456),
    )


@pytest.fixture
def mixed_parameters():
    return (
        ParameterDescriptor("isGrounded", ParameterKind.BOOL, -11),
        ParameterDescriptor("move_speed", ParameterKind.FLOAT, 22),
        ParameterDescriptor("combo-count", ParameterKind.INT, 33),
        ParameterDescriptor("Attack", ParameterKind.TRIGGER, 44),
    )


@pytest.fixture
def foo_config():
    return GeneratorConfig(class_name="Foo", visibility=AccessModifier.PUBLIC)


@pytest.fixture
def player_asset(mixed_parameters):
    return ControllerAsset(name="Player", parameters=mixed_parameters)
