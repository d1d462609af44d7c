from bson import ObjectId

# Collection names
USERS = 'users'
FOOD_ITEMS = 'food-items'
FOOD_ORDERS = 'food-orders'

# Fields an owner may change through PATCH /my-added-foods
FOOD_ITEM_EDITABLE_FIELDS = (
    'food_name',
    'food_image',
    'food_category',
    'quantity',
    'price',
    'origin',
    'ingredients',
)

TOP_FOOD_ITEMS_LIMIT = 6


def to_object_id(value):
    """Parse a hex id; raises bson.errors.InvalidId for malformed input"""
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


def insert_result(result):
    return {
        'acknowledged': result.acknowledged,
        'insertedId': result.inserted_id,
    }


def update_result(result):
    return {
        'acknowledged': result.acknowledged,
        'matchedCount': result.matched_count,
        'modifiedCount': result.modified_count,
        'upsertedCount': 1 if result.upserted_id is not None else 0,
        'upsertedId': result.upserted_id,
    }


def delete_result(result):
    return {
        'acknowledged': result.acknowledged,
        'deletedCount': result.deleted_count,
    }


def single_update_result(matched):
    """Update-result shape for a find_one_and_update on one document"""
    return {
        'acknowledged': True,
        'matchedCount': 1 if matched else 0,
        'modifiedCount': 1 if matched else 0,
        'upsertedCount': 0,
        'upsertedId': None,
    }


def single_delete_result(deleted):
    """Delete-result shape for a find_one_and_delete"""
    return {
        'acknowledged': True,
        'deletedCount': 1 if deleted else 0,
    }
