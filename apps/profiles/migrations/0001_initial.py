import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='The date and time this object was first created.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='The date and time this object was last updated.', verbose_name='Last Updated At')),
                ('company', models.CharField(blank=True, max_length=255, verbose_name='Company')),
                ('website', models.URLField(blank=True, max_length=500, verbose_name='Website')),
                ('location', models.CharField(blank=True, max_length=255, verbose_name='Location')),
                ('status', models.CharField(help_text='e.g., Student, Developer, Instructor', max_length=255, verbose_name='Status')),
                ('skills', models.JSONField(blank=True, default=list, verbose_name='Skills')),
                ('bio', models.TextField(blank=True, verbose_name='Bio')),
                ('githubusername', models.CharField(blank=True, max_length=100, verbose_name='GitHub Username')),
                ('social', models.JSONField(blank=True, default=dict, help_text='Any of: youtube, twitter, facebook, linkedin, instagram', verbose_name='Social Links')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL, verbose_name='User')),
            ],
            options={
                'verbose_name': 'Profile',
                'verbose_name_plural': 'Profiles',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Experience',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='The date and time this object was first created.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='The date and time this object was last updated.', verbose_name='Last Updated At')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('company', models.CharField(max_length=255, verbose_name='Company')),
                ('location', models.CharField(blank=True, max_length=255, verbose_name='Location')),
                ('from_date', models.DateField(verbose_name='From')),
                ('to_date', models.DateField(blank=True, null=True, verbose_name='To')),
                ('current', models.BooleanField(default=False, verbose_name='Current')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('profile', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='experience', to='profiles.profile')),
            ],
            options={
                'verbose_name': 'Experience',
                'verbose_name_plural': 'Experience',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Education',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='The date and time this object was first created.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='The date and time this object was last updated.', verbose_name='Last Updated At')),
                ('school', models.CharField(max_length=255, verbose_name='School')),
                ('degree', models.CharField(max_length=255, verbose_name='Degree')),
                ('fieldofstudy', models.CharField(max_length=255, verbose_name='Field of Study')),
                ('from_date', models.DateField(verbose_name='From')),
                ('to_date', models.DateField(blank=True, null=True, verbose_name='To')),
                ('current', models.BooleanField(default=False, verbose_name='Current')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('profile', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='education', to='profiles.profile')),
            ],
            options={
                'verbose_name': 'Education',
                'verbose_name_plural': 'Education',
                'ordering': ['-created_at'],
            },
        ),
    ]
