"""Product details management: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float(min_value=0.0)
    count_in_stock: Integer(min_value=0)
    description: Text()
    image: String(max_length=500)
    public_id: String(max_length=255)
    is_active: Boolean()


@storefront.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.update_details(
            name=command.name,
            price=command.price,
            count_in_stock=command.count_in_stock,
            description=command.description,
            image=command.image,
            public_id=command.public_id,
            is_active=command.is_active,
        )
        repo.add(product)

        logger.info("product_updated", product_id=str(product.id))
        return str(product.id)
