"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas
- 100% testável com repositórios em memória
- Agnóstico a infraestrutura
"""
