"""Order domain constants.

User-facing messages returned by the order and order-item endpoints.
"""

ORDER_NOT_FOUND = "Pedido não encontrado"
ORDER_DELETED = "Pedido excluído com sucesso"
ORDER_HAS_ITEMS = "Pedido não pode ser removido devido a itens de pedidos associados"

ORDER_ITEM_NOT_FOUND = "Item do Pedido não encontrado"
ORDER_ITEM_DELETED = "Item do Pedido excluído com sucesso"

CUSTOMER_NOT_FOUND = "Cliente não encontrado"
PRODUCT_NOT_FOUND = "Produto não encontrado"
