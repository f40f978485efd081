import uuid

import django.core.serializers.json
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="WeeklyReport",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("week_start_date", models.DateTimeField(verbose_name="week start")),
                ("week_end_date", models.DateTimeField(verbose_name="week end")),
                ("brand", models.CharField(db_index=True, max_length=200, verbose_name="brand")),
                (
                    "deliverables",
                    models.JSONField(
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="deliverables",
                    ),
                ),
                (
                    "next_week_targets",
                    models.JSONField(
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="next week targets",
                    ),
                ),
                ("additional_notes", models.TextField(blank=True, default="", verbose_name="additional notes")),
                (
                    "kpis",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="KPI snapshot",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Draft", "Draft"),
                            ("Submitted", "Submitted"),
                            ("Under Review", "Under Review"),
                            ("Approved", "Approved"),
                            ("Needs Revision", "Needs Revision"),
                        ],
                        db_index=True,
                        default="Draft",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("admin_comments", models.TextField(blank=True, default="", verbose_name="admin comments")),
                ("submitted_at", models.DateTimeField(blank=True, null=True, verbose_name="submitted at")),
                ("reviewed_at", models.DateTimeField(blank=True, null=True, verbose_name="reviewed at")),
                (
                    "reviewed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="reviewed_reports",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="reviewed by",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="weekly_reports",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="employee",
                    ),
                ),
            ],
            options={
                "verbose_name": "weekly report",
                "verbose_name_plural": "weekly reports",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-week_start_date"], name="report_user_week_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="KPI",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("social_media_followers", models.PositiveIntegerField(default=0, verbose_name="social media followers")),
                ("engagement_rate", models.FloatField(default=0, verbose_name="engagement rate")),
                ("reach", models.PositiveIntegerField(default=0, verbose_name="reach")),
                ("impressions", models.PositiveIntegerField(default=0, verbose_name="impressions")),
                ("clicks", models.PositiveIntegerField(default=0, verbose_name="clicks")),
                ("conversions", models.PositiveIntegerField(default=0, verbose_name="conversions")),
                ("content_created", models.PositiveIntegerField(default=0, verbose_name="content created")),
                ("campaigns_launched", models.PositiveIntegerField(default=0, verbose_name="campaigns launched")),
                (
                    "custom_kpis",
                    models.JSONField(
                        blank=True,
                        default=list,
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        verbose_name="custom KPIs",
                    ),
                ),
                ("period_start", models.DateTimeField(verbose_name="period start")),
                ("period_end", models.DateTimeField(verbose_name="period end")),
                (
                    "report",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="kpi_records",
                        to="reports.weeklyreport",
                        verbose_name="report",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="kpi_records",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="employee",
                    ),
                ),
            ],
            options={
                "verbose_name": "KPI",
                "verbose_name_plural": "KPIs",
                "ordering": ["-created_at"],
            },
        ),
    ]
