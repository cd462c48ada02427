from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='DescriptionPage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date_creation', models.DateTimeField(auto_now_add=True)),
                ('date_modification', models.DateTimeField(auto_now=True)),
                ('chemin_page', models.CharField(max_length=255, unique=True)),
                ('titre', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('description_courte', models.CharField(blank=True, default='', max_length=300)),
                ('actif', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Description de page',
                'verbose_name_plural': 'Descriptions de pages',
                'ordering': ['-date_creation', '-id'],
                'abstract': False,
            },
        ),
    ]
