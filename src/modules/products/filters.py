import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    descricao = django_filters.CharFilter(field_name="descricao", lookup_expr="icontains")
    preco_min = django_filters.NumberFilter(field_name="preco", lookup_expr="gte")
    preco_max = django_filters.NumberFilter(field_name="preco", lookup_expr="lte")

    class Meta:
        model = Product
        fields = ["descricao", "preco_min", "preco_max"]
