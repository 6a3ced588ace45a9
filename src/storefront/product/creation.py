"""Product creation: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    count_in_stock: Integer(min_value=0, default=0)
    description: Text(required=True)
    image: String(max_length=500)
    public_id: String(max_length=255)
    is_active: Boolean(default=True)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            count_in_stock=command.count_in_stock,
            description=command.description,
            image=command.image,
            public_id=command.public_id,
            is_active=command.is_active,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("product_created", product_id=str(product.id), name=product.name)
        return str(product.id)
