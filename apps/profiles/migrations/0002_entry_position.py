from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('profiles', '0001_initial'),
    ]

    operations = [
        migrations.AlterModelOptions(
            name='education',
            options={'ordering': ['-position', '-created_at'], 'verbose_name': 'Education', 'verbose_name_plural': 'Education'},
        ),
        migrations.AlterModelOptions(
            name='experience',
            options={'ordering': ['-position', '-created_at'], 'verbose_name': 'Experience', 'verbose_name_plural': 'Experience'},
        ),
        migrations.AddField(
            model_name='education',
            name='position',
            field=models.PositiveIntegerField(default=0, editable=False, verbose_name='Position'),
        ),
        migrations.AddField(
            model_name='experience',
            name='position',
            field=models.PositiveIntegerField(default=0, editable=False, verbose_name='Position'),
        ),
    ]
