"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (resolução da referência + agregação)
- services/: agregação paginada e achatamento para exportação
- domain/: modelos de comentário e vídeo
- infra/: implementações concretas de IO (YouTube Data API)
- protocols/: contratos/interfaces
- observability/: correlation id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
