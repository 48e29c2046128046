"""Version information for push-deploy package"""

__version__ = "0.3.0"
__version_info__ = (0, 3, 0)
__license__ = "MIT"
