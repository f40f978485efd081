"""Serializers for the weekly reporting API v1."""
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from accounts.models import normalize_account_email
from reports.models import KPI, DeliverableStatus, TargetPriority, WeeklyReport

User = get_user_model()


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class UserSerializer(serializers.ModelSerializer):
    """Public account representation; the password hash is never exposed."""

    class Meta:
        model = User
        fields = [
            "id", "name", "email", "position", "role", "department",
            "profile_picture", "is_active", "date_joined",
        ]
        read_only_fields = fields


class UserBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email", "position"]
        read_only_fields = fields


class ReviewerSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name"]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """Self-editable profile fields; omitted fields are left unchanged."""

    name = serializers.CharField(
        required=False,
        min_length=2,
        max_length=150,
        error_messages={"min_length": "Name must be at least 2 characters."},
    )
    position = serializers.ChoiceField(choices=User.Position.choices, required=False)


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(min_length=2, max_length=150)
    position = serializers.ChoiceField(choices=User.Position.choices, default=User.Position.OTHER)

    def validate_email(self, value):
        email = normalize_account_email(value)
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("An account with this email already exists.")
        return email

    def validate(self, attrs):
        candidate = User(email=attrs["email"], name=attrs["name"])
        try:
            validate_password(attrs["password"], user=candidate)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({"password": list(exc.messages)})
        return attrs


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class LoginSerializer(TokenObtainPairSerializer):
    """Email/password login; the access token also carries the account role."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        return token

    def validate(self, attrs):
        attrs[self.username_field] = normalize_account_email(attrs.get(self.username_field))
        data = super().validate(attrs)
        data["user"] = UserSerializer(self.user).data
        return data


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, min_length=8, write_only=True)

    def validate_old_password(self, value):
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect.")
        return value

    def validate_new_password(self, value):
        user = self.context["request"].user
        try:
            validate_password(value, user=user)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(list(exc.messages))
        return value


# ---------------------------------------------------------------------------
# Weekly reports
# ---------------------------------------------------------------------------

class DeliverableSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300)
    description = serializers.CharField()
    status = serializers.ChoiceField(choices=DeliverableStatus.choices, default=DeliverableStatus.COMPLETED)
    completion_date = serializers.DateField(required=False, allow_null=True)


class TargetSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=300)
    description = serializers.CharField()
    due_date = serializers.DateField()
    priority = serializers.ChoiceField(choices=TargetPriority.choices, default=TargetPriority.MEDIUM)


class CustomMetricSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    value = serializers.FloatField()
    unit = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")


class KPISnapshotSerializer(serializers.Serializer):
    engagement_rate = serializers.FloatField(min_value=0, required=False, default=0)
    reach = serializers.IntegerField(min_value=0, required=False, default=0)
    conversions = serializers.IntegerField(min_value=0, required=False, default=0)
    custom_metrics = CustomMetricSerializer(many=True, required=False, default=list)


class WeeklyReportCreateSerializer(serializers.Serializer):
    """Submission payload; the week window is computed server-side."""

    brand = serializers.CharField(
        max_length=200,
        error_messages={"blank": "Brand is required.", "required": "Brand is required."},
    )
    deliverables = DeliverableSerializer(
        many=True,
        allow_empty=False,
        error_messages={"empty": "At least one deliverable is required."},
    )
    next_week_targets = TargetSerializer(
        many=True,
        allow_empty=False,
        error_messages={"empty": "At least one target for next week is required."},
    )
    additional_notes = serializers.CharField(required=False, allow_blank=True, default="")
    kpis = KPISnapshotSerializer(required=False, allow_null=True, default=None)


class WeeklyReportSerializer(serializers.ModelSerializer):
    user = UserBriefSerializer(read_only=True)
    reviewed_by = ReviewerSerializer(read_only=True)

    class Meta:
        model = WeeklyReport
        fields = [
            "id", "user", "week_start_date", "week_end_date", "brand",
            "deliverables", "next_week_targets", "additional_notes", "kpis",
            "status", "admin_comments", "submitted_at", "reviewed_at",
            "reviewed_by", "created_at", "updated_at",
        ]
        read_only_fields = fields


class WeeklyReportSummarySerializer(serializers.ModelSerializer):
    """Compact row for dashboards."""

    user = serializers.SerializerMethodField()

    class Meta:
        model = WeeklyReport
        fields = ["id", "user", "week_start_date", "brand", "status", "created_at"]
        read_only_fields = fields

    def get_user(self, obj):
        return {"id": str(obj.user_id), "name": obj.user.name, "position": obj.user.position}


class CurrentWeekReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = WeeklyReport
        fields = ["id", "status", "brand", "submitted_at"]
        read_only_fields = fields


class ReportReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=[(value, value) for value in WeeklyReport.REVIEW_STATUSES],
        error_messages={"invalid_choice": "Invalid status."},
    )
    admin_comments = serializers.CharField(required=False, allow_blank=True, default="")


# ---------------------------------------------------------------------------
# Standalone KPI records
# ---------------------------------------------------------------------------

class CustomKPISerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    value = serializers.FloatField()
    unit = serializers.CharField(max_length=30, required=False, allow_blank=True, default="")
    target = serializers.FloatField(required=False, default=0)


class KPICreateSerializer(serializers.Serializer):
    social_media_followers = serializers.IntegerField(min_value=0, required=False, default=0)
    engagement_rate = serializers.FloatField(min_value=0, required=False, default=0)
    reach = serializers.IntegerField(min_value=0, required=False, default=0)
    impressions = serializers.IntegerField(min_value=0, required=False, default=0)
    clicks = serializers.IntegerField(min_value=0, required=False, default=0)
    conversions = serializers.IntegerField(min_value=0, required=False, default=0)
    content_created = serializers.IntegerField(min_value=0, required=False, default=0)
    campaigns_launched = serializers.IntegerField(min_value=0, required=False, default=0)
    custom_kpis = CustomKPISerializer(many=True, required=False, default=list)
    period_start = serializers.DateTimeField(required=False, allow_null=True, default=None)
    period_end = serializers.DateTimeField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        start, end = attrs.get("period_start"), attrs.get("period_end")
        if start and end and end < start:
            raise serializers.ValidationError({"period_end": "period_end must not be before period_start."})
        return attrs


class KPISerializer(serializers.ModelSerializer):
    report = serializers.PrimaryKeyRelatedField(read_only=True)
    brand = serializers.CharField(source="report.brand", read_only=True)

    class Meta:
        model = KPI
        fields = [
            "id", "user", "report", "brand",
            "social_media_followers", "engagement_rate", "reach", "impressions",
            "clicks", "conversions", "content_created", "campaigns_launched",
            "custom_kpis", "period_start", "period_end", "created_at", "updated_at",
        ]
        read_only_fields = fields
