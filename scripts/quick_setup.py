#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura logging
2. Cria o container (store vazio)
3. Carrega dados de demonstração (opcional)
4. Mostra indicadores do painel

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --with-sample-data --seed 42
"""

import argparse
import json
import os
import random
import sys

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def create_sample_data(container, seed=None):
    """Carrega dados de demonstração."""
    from solarflow.adapters.memory.seed import seed_demo_data

    print("📝 Carregando dados de demonstração...")
    counts = seed_demo_data(container, rng=random.Random(seed))

    for collection, total in counts.items():
        print(f"   ✓ {collection}: {total}")

    print("✅ Dados de demonstração carregados!")


def show_info(container):
    """Mostra indicadores calculados sobre o store."""
    print("\n" + "=" * 60)
    print("📊 Indicadores")
    print("=" * 60)

    ticket_stats = container.ticket_stats_service().execute()
    maintenance_stats = container.maintenance_stats_service().execute()

    print("  Tickets:")
    print(f"    {json.dumps(ticket_stats.to_dict(), default=str)}")
    print("  Manutenção:")
    for key, value in maintenance_stats.to_dict().items():
        if key != "upcomingServices":
            print(f"    {key}: {value}")
    print(f"    upcomingServices: {len(maintenance_stats.upcoming_services)}")

    for system in container.list_solar_systems_service().execute():
        stats = container.system_performance_stats_service().execute(system.id)
        print(f"  Sistema #{system.id} ({system.name}):")
        print(f"    total: {stats.total_energy_generated:.1f} kWh")
        print(f"    tendência: {stats.performance_trend:.1f}%")

    print("\n  Atividades recentes:")
    for activity in container.list_recent_activities_service().execute():
        print(f"    [{activity.action}] {activity.details}")

    print("=" * 60 + "\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Semente do gerador aleatório dos dados de exemplo'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Sobrescreve LOG_LEVEL (ex: DEBUG)'
    )

    args = parser.parse_args()

    from solarflow.config.container import Container
    from solarflow.config.settings import configure_logging

    configure_logging(args.log_level)

    print("\n🔧 SolarFlow - Setup Rápido\n")

    container = Container()

    if args.with_sample_data:
        create_sample_data(container, seed=args.seed)

    show_info(container)


if __name__ == '__main__':
    main()
