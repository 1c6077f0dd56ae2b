# services/location.py
from models.location import AuthorizationStatus


class LocationProvider:
    """
    Device location permission source. Platform integrations subclass this;
    authorization changes and fixes are delivered to the ProfileController.
    """

    def __init__(self, status: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED):
        self.status = status

    def request_permission(self):
        raise NotImplementedError
