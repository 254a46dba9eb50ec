"""API: camada de borda.

Responsabilidades:
- Receber requests HTTP e aplicar validações iniciais
- Resolver referências de vídeo informadas pelo usuário
- Normalizar payloads da YouTube Data API para modelos internos

Subpastas:
- normalizers/: conversão de payloads externos em modelos internos
- validators/: validação de entradas do usuário
- routes/: endpoints HTTP (coleta de comentários, health)

NÃO PODE conter: paginação, retry ou orquestração de use cases.
"""
