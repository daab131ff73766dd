# Generated migration for community app

from django.db import migrations, models
import django.db.models.functions.comparison


class Migration(migrations.Migration):

    dependencies = [
        ('community', '0001_initial'),
    ]

    operations = [
        migrations.RemoveConstraint(
            model_name='friendship',
            name='unique_friendship_per_direction',
        ),
        migrations.AddConstraint(
            model_name='friendship',
            constraint=models.UniqueConstraint(django.db.models.functions.comparison.Least('user', 'friend'), django.db.models.functions.comparison.Greatest('user', 'friend'), name='unique_friendship_per_pair'),
        ),
    ]
