"""
Configurações globais do Pytest para o SolarFlow.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

from datetime import datetime
from pathlib import Path

import pytest

from solarflow.config.container import Container


# Quinta-feira, meio da tarde: "hoje" = 2024-06-13 00:00
FIXED_NOW = datetime(2024, 6, 13, 15, 30)


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def now():
    """Momento fixo usado pelo relógio dos testes."""
    return FIXED_NOW


@pytest.fixture
def clock(now):
    """Relógio que sempre devolve `now`."""
    return lambda: now


@pytest.fixture
def container(clock):
    """
    Container com store vazio e relógio fixo.

    Cada teste recebe um container novo (store, publisher e
    auditoria próprios).
    """
    container = Container()
    container.clock.override(clock)
    yield container
    container.clock.reset_override()


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes marcados como integração sem --run-integration."""
    skip_integration = pytest.mark.skip(reason="use --run-integration to run")

    for item in items:
        if item.get_closest_marker("integration"):
            if not config.getoption("--run-integration", default=False):
                item.add_marker(skip_integration)


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
