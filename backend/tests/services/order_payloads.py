"""Inbound order payload builders shared by service and route tests."""


def make_payload(
    numero_pedido: str = "1001-01",
    data_criacao: str = "2024-01-01T00:00:00+00:00",
    valor_total: float = 99.5,
    items: list[dict] | None = None,
) -> dict:
    """Inbound order JSON in the client's field naming."""
    if items is None:
        items = [
            {"idItem": "7", "quantidadeItem": 2, "valorItem": 10.0},
            {"idItem": "8", "quantidadeItem": 1, "valorItem": 79.5},
        ]
    return {
        "numeroPedido": numero_pedido,
        "dataCriacao": data_criacao,
        "valorTotal": valor_total,
        "items": items,
    }
