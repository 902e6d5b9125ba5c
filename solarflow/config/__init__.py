"""
Configuração do SolarFlow.

Módulos:
- settings: Variáveis de ambiente e logging
- container: Dependency Injection Container
"""
