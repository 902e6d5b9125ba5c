"""
SolarFlow - Store embarcado do painel de suporte e instalações solares.

Camadas:
- core: domínio puro (entidades, eventos, use cases, estatísticas)
- adapters: store em memória, Unit of Work, publicador de eventos
- config: settings e container de DI
"""

__version__ = "1.0.0"
