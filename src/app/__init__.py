"""App — orquestração, casos de uso e infraestrutura do extrator de leads.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: Contact (extraído) e PersistedContact (salvo)
- use_cases/: casos de uso (salvar contatos extraídos)
- services/: envio ao Spotter, exportação CSV, busca e filtros
- infra/: implementações concretas de IO (HTTP, stores, secrets)
- protocols/: contratos/interfaces dos colaboradores externos
- observability/: correlation_id e métricas via logs estruturados

Padrão: extraction reconhece; app executa; api adapta; fsm governa; utils apoia.
"""
