"""API — camada de borda HTTP e adapters do CRM.

Responsabilidades:
- Expor endpoints HTTP (extração, salvamento, envio ao Spotter)
- Validar payloads de entrada (schemas pydantic)
- Construir payloads para a API do Spotter
- Falar HTTP com o Spotter (connector)

Subpastas:
- connectors/: clientes HTTP de APIs externas
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (leads, health)

NÃO PODE conter: FSM, regras de extração, orquestração de use cases.
"""
