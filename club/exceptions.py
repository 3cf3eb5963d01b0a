"""
Errors raised by the club app
"""


class ClubError(Exception):
    """Base class for club portal errors"""


class ImageUploadError(ClubError):
    """The image host rejected an upload or could not be reached"""


class ReauthenticationRequired(ClubError):
    """An action on an administrator account needs a fresh password check"""

    def __init__(self, action, target):
        self.action = action
        self.target = target
        super().__init__(f"Password confirmation required to {action} {target}")
