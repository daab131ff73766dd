# Generated migration for trails app

from django.core import validators
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Trail',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='The official name of the trail', max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('distance', models.FloatField(blank=True, help_text='Trail length in kilometers', null=True, validators=[validators.MinValueValidator(0)])),
                ('elevation', models.FloatField(blank=True, help_text='Elevation gain in meters', null=True)),
                ('difficulty', models.CharField(choices=[('easy', 'Easy'), ('moderate', 'Moderate'), ('hard', 'Hard')], max_length=20)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('latitude', models.FloatField(blank=True, null=True)),
                ('longitude', models.FloatField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['created_at', 'name'],
            },
        ),
        migrations.CreateModel(
            name='TrailPhoto',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('url', models.URLField(max_length=500)),
                ('alt', models.CharField(blank=True, default='', max_length=255)),
                ('is_primary', models.BooleanField(default=False)),
                ('position', models.PositiveIntegerField(default=0, help_text="Display order within the trail's gallery")),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('trail', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='photos', to='trails.trail')),
            ],
            options={
                'ordering': ['trail', 'position'],
            },
        ),
        migrations.AddIndex(
            model_name='trail',
            index=models.Index(fields=['difficulty'], name='trails_difficulty_idx'),
        ),
    ]
