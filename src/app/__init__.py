"""App — orquestração e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxos end-to-end (log de chat → pipeline → fila)
- infra/: implementações concretas (sender resolver, fila em memória)
- protocols/: contratos/interfaces e modelos normalizados
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
