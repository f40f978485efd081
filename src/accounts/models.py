import uuid

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)
from django.db import models
from django.utils import timezone


def normalize_account_email(email):
    """Emails are unique case-insensitively; store them lower-cased."""
    return (email or "").strip().lower()


class UserManager(BaseUserManager):
    """Custom manager for the User model that uses email as the unique identifier."""

    use_in_migrations = True

    def get_by_natural_key(self, email):
        return self.get(email__iexact=normalize_account_email(email))

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        email = normalize_account_email(email)
        extra_fields.setdefault("is_active", True)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", User.Role.ADMIN)
        extra_fields.setdefault("position", User.Position.ADMINISTRATOR)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Employee account for the weekly reporting backend.

    Uses email as the unique identifier instead of a username. ``role``
    decides what the API lets the account do (``staff`` submits reports,
    ``admin`` reviews them); ``is_staff`` only opens the Django admin site.
    """

    class Role(models.TextChoices):
        STAFF = "staff", "Staff"
        ADMIN = "admin", "Admin"

    class Position(models.TextChoices):
        SOCIAL_MEDIA_MANAGER = "Social Media Manager", "Social Media Manager"
        CONTENT_CREATOR = "Content Creator", "Content Creator"
        VIDEO_EDITOR = "Video Editor", "Video Editor"
        CREATIVE_DESIGNER = "Creative Designer", "Creative Designer"
        SEO = "SEO", "SEO"
        OTHER = "Other", "Other"
        ARTICLE_WRITER = "Article writer", "Article writer"
        ADMINISTRATOR = "Administrator", "Administrator"

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    email = models.EmailField(
        "email address",
        unique=True,
        error_messages={
            "unique": "A user with this email address already exists.",
        },
    )
    name = models.CharField("name", max_length=150)
    position = models.CharField(
        "position",
        max_length=40,
        choices=Position.choices,
        default=Position.OTHER,
    )
    role = models.CharField(
        "role",
        max_length=10,
        choices=Role.choices,
        default=Role.STAFF,
        db_index=True,
    )
    department = models.CharField("department", max_length=100, default="Marketing")
    profile_picture = models.URLField("profile picture", blank=True, default="")
    is_active = models.BooleanField("active", default=True, db_index=True)
    is_staff = models.BooleanField("admin site access", default=False)
    date_joined = models.DateTimeField("date joined", default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["name"]

    def __str__(self):
        return self.name or self.email

    def save(self, *args, **kwargs):
        self.email = normalize_account_email(self.email)
        super().save(*args, **kwargs)

    def get_full_name(self):
        return self.name.strip()

    def get_short_name(self):
        return self.name.split(" ")[0] if self.name else ""

    @property
    def is_admin(self):
        return self.role == self.Role.ADMIN
