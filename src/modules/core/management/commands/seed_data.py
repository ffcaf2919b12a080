from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.customers.models import Customer
from modules.orders.models import Order, OrderItem
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=30,
            help="Number of orders to create (default: 30).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        products = self._seed_products()
        orders_created, items_created = self._seed_orders(
            customers, products, options["orders"]
        )

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"clientes={len(customers)}, "
                f"produtos={len(products)}, "
                f"pedidos={orders_created}, "
                f"itens={items_created}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana", "Souza", "39053344705"),
            ("Bruno", "Lima", "11144477735"),
            ("Carla", "Mendes", "98765432100"),
            ("Daniel", "Costa", "52998224725"),
            ("Fernanda", "Rocha", "74125896300"),
            ("Gabriel", "Santos", "36925814700"),
            ("Helena", "Ferreira", "25814736900"),
            ("Julia", "Oliveira", "15935745600"),
        ]
        for nome, sobrenome, cpf in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                cpf=cpf,
                defaults={"nome": nome, "sobrenome": sobrenome},
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Monitor 27\"", Decimal("1299.90")),
            ("Teclado Mecânico", Decimal("399.90")),
            ("Mouse Gamer", Decimal("249.90")),
            ("Notebook 14\"", Decimal("3999.00")),
            ("Mesa Escritório", Decimal("899.00")),
            ("Cadeira Ergonômica", Decimal("1499.00")),
            ("Papel A4", Decimal("29.90")),
            ("Caneta Azul", Decimal("4.90")),
            ("Caderno", Decimal("19.90")),
            ("Brinde promocional", None),
        ]
        for descricao, preco in catalog:
            product, _ = Product.objects.get_or_create(
                descricao=descricao,
                defaults={"preco": preco},
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(
        self,
        customers: Iterable[Customer],
        products: list[Product],
        count: int,
    ) -> tuple[int, int]:
        self.stdout.write("Creating orders...")
        customers_list = list(customers)
        if not customers_list or not products:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/products)."))
            return 0, 0

        today = date.today()
        items_created = 0
        for _ in range(count):
            order = Order.objects.create(
                data=today - timedelta(days=random.randint(0, 60)),
                cliente=random.choice(customers_list),
            )
            item_count = random.randint(1, 4)
            for product in random.sample(products, k=min(item_count, len(products))):
                OrderItem.objects.create(
                    pedido=order,
                    produto=product,
                    quantidade=random.randint(1, 5),
                )
                items_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count, items_created
