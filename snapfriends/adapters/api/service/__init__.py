from .friends import FriendsClient, DEFAULT_ACCURACY_METERS
