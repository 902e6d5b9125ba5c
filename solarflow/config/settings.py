"""
Settings do SolarFlow.

Configurações lidas de variáveis de ambiente (arquivo .env opcional).
Nada aqui é secreto: o store é embarcado e não persiste dados.
"""

import logging.config
import os
from pathlib import Path

from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'solarflow.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'solarflow.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configure_logging(level: str = None) -> None:
    """
    Aplica a configuração de logging.

    Args:
        level: Sobrescreve LOG_LEVEL (ex: "DEBUG" no quick_setup)
    """
    config = LOGGING
    if level:
        config = {
            **LOGGING,
            'root': {**LOGGING['root'], 'level': level},
            'loggers': {
                name: {**logger, 'level': level}
                for name, logger in LOGGING['loggers'].items()
            },
        }
    logging.config.dictConfig(config)


# =============================================================================
# Indicadores ainda não medidos (Domain)
# =============================================================================

# Valores exibidos no painel até existir coleta real
TICKET_AVG_RESPONSE_TIME_HOURS = float(os.getenv('TICKET_AVG_RESPONSE_TIME_HOURS', 2.4))
TICKET_CUSTOMER_SATISFACTION = float(os.getenv('TICKET_CUSTOMER_SATISFACTION', 94))
MAINTENANCE_AVERAGE_RATING = float(os.getenv('MAINTENANCE_AVERAGE_RATING', 4.7))

# =============================================================================
# Limites de listagem
# =============================================================================

UPCOMING_SERVICES_LIMIT = int(os.getenv('UPCOMING_SERVICES_LIMIT', 5))
RECENT_ACTIVITIES_LIMIT = int(os.getenv('RECENT_ACTIVITIES_LIMIT', 10))

# Formato consumido por providers.Configuration do container
STORE_SETTINGS = {
    'tickets': {
        'avg_response_time': TICKET_AVG_RESPONSE_TIME_HOURS,
        'customer_satisfaction': TICKET_CUSTOMER_SATISFACTION,
    },
    'maintenance': {
        'average_rating': MAINTENANCE_AVERAGE_RATING,
        'upcoming_limit': UPCOMING_SERVICES_LIMIT,
    },
    'activities': {
        'recent_limit': RECENT_ACTIVITIES_LIMIT,
    },
}
