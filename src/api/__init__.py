"""API — camada de borda e adapters de canais.

Responsabilidades:
- Identificadores determinísticos por canal (portal, usuário, mensagem)
- Normalizar payloads externos para modelos internos

Subpastas:
- connectors/: helpers de identidade e URLs por canal
- normalizers/: conversão de payloads externos → modelos internos

NÃO PODE conter: orquestração, fila de delivery, IO de rede.
"""
