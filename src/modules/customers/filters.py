import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    nome = django_filters.CharFilter(field_name="nome", lookup_expr="icontains")
    sobrenome = django_filters.CharFilter(field_name="sobrenome", lookup_expr="icontains")
    cpf = django_filters.CharFilter(field_name="cpf", lookup_expr="exact")

    class Meta:
        model = Customer
        fields = ["nome", "sobrenome", "cpf"]
