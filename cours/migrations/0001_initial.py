from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Cours',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date_creation', models.DateTimeField(auto_now_add=True)),
                ('date_modification', models.DateTimeField(auto_now=True)),
                ('categorie', models.CharField(db_index=True, max_length=80)),
                ('nom', models.CharField(max_length=60)),
                ('lien_cours', models.CharField(blank=True, max_length=500, null=True)),
                ('lien_exercices', models.CharField(blank=True, max_length=500, null=True)),
                ('lien_devoir', models.CharField(blank=True, max_length=500, null=True)),
                ('lien_examen', models.CharField(blank=True, max_length=500, null=True)),
            ],
            options={
                'verbose_name': 'Cours',
                'verbose_name_plural': 'Cours',
                'ordering': ['-date_creation', '-id'],
                'abstract': False,
            },
        ),
    ]
