# Order placement and cancellation against the food-items stock
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from flask import current_app

from flavor_fusion.models.models import (
    to_object_id,
    insert_result,
    update_result,
    single_update_result,
    single_delete_result,
)

OWN_FOOD_ITEM = 'Own food item'
ITEM_NOT_AVAILABLE = 'Item is not available'
LESS_ITEM_AVAILABLE = 'Less item available'


class FlavorFusionError(Exception):
    """Base class for errors reported at the handler boundary"""


class FoodItemNotFound(FlavorFusionError):
    def __init__(self, food_id):
        super().__init__(f"Food item {food_id} not found")
        self.food_id = food_id


class FoodOrderNotFound(FlavorFusionError):
    def __init__(self, order_id):
        super().__init__(f"Food order {order_id} not found")
        self.order_id = order_id


class OrderService:
    def __init__(self, store):
        self.store = store

    @staticmethod
    def rejection_for(item, order):
        """Business-rule message for an order the item cannot fill, else None"""
        if (item.get('added_by_name') == order.buyer_name
                and item.get('added_by_email') == order.buyer_email):
            return OWN_FOOD_ITEM
        quantity = item.get('quantity', 0)
        if quantity == 0:
            return ITEM_NOT_AVAILABLE
        if order.ordered > quantity:
            return LESS_ITEM_AVAILABLE
        return None

    def _find_item(self, food_id):
        item = self.store.food_items.find_one({'_id': food_id})
        if item is None:
            raise FoodItemNotFound(food_id)
        return item

    def _reserve_stock(self, food_id, ordered):
        """Take `ordered` units only if that many are still in stock"""
        return self.store.food_items.find_one_and_update(
            {'_id': food_id, 'quantity': {'$gte': ordered}},
            {'$inc': {'quantity': -ordered, 'order': ordered}},
            return_document=ReturnDocument.AFTER,
        )

    def _release_stock(self, food_id, ordered):
        return self.store.food_items.update_one(
            {'_id': food_id},
            {'$inc': {'quantity': ordered, 'order': -ordered}},
        )

    def place_order(self, order):
        """Record an order and move its units from quantity to order.

        Stock is reserved with a conditional update before the order is
        inserted, so concurrent orders can never oversell an item. If the
        insert fails the reservation is released and the error re-raised.
        """
        food_id = to_object_id(order.food_id)
        item = self._find_item(food_id)

        rejection = self.rejection_for(item, order)
        if rejection:
            current_app.logger.info(f"Order for {food_id} by {order.buyer_email} rejected: {rejection}")
            return {'message': rejection}

        reserved = self._reserve_stock(food_id, order.ordered)
        if reserved is None:
            # stock changed between the read and the update
            item = self._find_item(food_id)
            rejection = self.rejection_for(item, order) or LESS_ITEM_AVAILABLE
            current_app.logger.info(f"Order for {food_id} lost a stock race: {rejection}")
            return {'message': rejection}

        try:
            result = self.store.food_orders.insert_one(order.model_dump())
        except PyMongoError as e:
            current_app.logger.error(f"Order insert failed for {food_id}, releasing stock: {e}")
            self._release_stock(food_id, order.ordered)
            raise

        current_app.logger.info(
            f"Order {result.inserted_id} placed: {order.ordered} x {food_id} for {order.buyer_email}"
        )
        return {
            'orderResult': insert_result(result),
            'updateResult': single_update_result(True),
        }

    def cancel_order(self, order_id):
        """Delete an order and give its units back to the item.

        The order is claimed first so concurrent cancels restore stock once.
        If the restore fails the claimed order is put back and the error
        re-raised.
        """
        order = self.store.food_orders.find_one_and_delete({'_id': to_object_id(order_id)})
        if order is None:
            raise FoodOrderNotFound(order_id)

        food_id = to_object_id(order['food_id'])
        try:
            result = self._release_stock(food_id, order.get('ordered', 0))
        except PyMongoError as e:
            current_app.logger.error(f"Stock restore failed for order {order_id}, re-inserting order: {e}")
            self.store.food_orders.insert_one(order)
            raise
        if result.matched_count == 0:
            current_app.logger.warning(
                f"Order {order_id} referenced missing food item {food_id}; no stock restored"
            )
        else:
            current_app.logger.info(f"Order {order_id} cancelled, {order.get('ordered', 0)} x {food_id} restored")

        return {
            'orderDeleteResult': single_delete_result(True),
            'updateFoodResult': update_result(result),
        }
