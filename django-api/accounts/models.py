from django.conf import settings
from django.db import models


class Session(models.Model):
    """A login session: the bearer token issued to a user.

    A token is only honoured while its Session row exists.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="login_sessions"
    )
    token = models.TextField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Session #{self.pk} for {self.user}"
