# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Order notifications, processed asynchronously by Celery.
    Runs after the checkout transaction committed, so a failure here never
    touches the order.
    """

    def send_order_confirmation(self, user_id: int, order_id: int) -> bool:
        try:
            send_order_confirmation_task.delay(user_id, order_id)
        except Exception as e:
            logger.warning(f"Could not queue confirmation for order {order_id}: {e}")
            return False
        return True


@celery_app.task(name="storefront.services.notification_service.send_order_confirmation_task")
def send_order_confirmation_task(user_id: int, order_id: int):
    """
    Celery task. A real deployment would hand this to an email/SMS provider,
    for now it only logs.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} confirmed")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
