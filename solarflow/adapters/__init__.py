"""
Adapters - Implementações dos Ports do core.

- memory: store em memória, repositórios e Unit of Work
- events: publicadores de eventos
"""
