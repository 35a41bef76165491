"""
Built-in site inspection catalog.
Catalog shape:
[
  {
    "title": "1. Housekeeping & Cleanliness",
    "items": [
      {"id": "1.1", "text": "Dinding & Ventilasi", "repeatable": True},
      ...
    ],
  },
  ...
]
Item ids are unique across the whole catalog.
"""

BUILTIN_CATALOG = (
    # ---------- 1 ----------
    {
        "title": "1. Housekeeping & Cleanliness",
        "items": (
            {"id": "1.1", "text": "Dinding & Ventilasi", "repeatable": True},
            {"id": "1.2", "text": "Jendela", "repeatable": True},
            {"id": "1.3", "text": "Pintu", "repeatable": True},
            {"id": "1.4", "text": "Lantai & Tangga", "repeatable": True},
            {"id": "1.5", "text": "Jalur Pejalan Kaki", "repeatable": True},
            {"id": "1.6", "text": "Area Umum & Fasilitas", "repeatable": True},
            {"id": "1.7", "text": "Kebersihan Alat Berat", "repeatable": True},
            {"id": "1.8", "text": "Pengendalian Debu", "repeatable": True},
        ),
    },

    # ---------- 2 ----------
    {
        "title": "2. Occupational Health & Safety",
        "items": (
            {"id": "2.1", "text": "Penggunaan APD", "repeatable": True},
            {"id": "2.2", "text": "Rambu & Marka Keselamatan", "repeatable": True},
            {"id": "2.3", "text": "Titik Kumpul", "repeatable": True},
            {"id": "2.4", "text": "P3K & Fasilitas Medis", "repeatable": True},
            {"id": "2.5", "text": "Manajemen Kebisingan", "repeatable": True},
            {"id": "2.6", "text": "Manajemen Lalu Lintas Kendaraan Berat", "repeatable": True},
        ),
    },

    # ---------- 3 ----------
    {
        "title": "3. Material & Product Management",
        "items": (
            {"id": "3.1", "text": "Area Sampah Masuk/MSW", "repeatable": True},
            {"id": "3.2", "text": "Fasilitas Pengumpanan", "repeatable": True},
            {"id": "3.3", "text": "Proses RDF", "repeatable": True},
            {"id": "3.4", "text": "Produk RDF", "repeatable": True},
            {"id": "3.5", "text": "Penyimpanan RDF", "repeatable": True},
            {"id": "3.6", "text": "Kualitas Visual Produk RDF", "repeatable": True},
            {"id": "3.7", "text": "Ukuran", "repeatable": True},
            {"id": "3.8", "text": "Kelembaban", "repeatable": True},
            {"id": "3.9", "text": "Manajemen Lindi", "repeatable": True},
            {"id": "3.10", "text": "Kontrol Kualitas & Laboratorium (Sampel)", "repeatable": True},
        ),
    },

    # ---------- 4 ----------
    {
        "title": "4. Equipment & Operational Condition",
        "items": (
            {"id": "4.1", "text": "Kondisi Mesin (Shredder, Conveyor)", "repeatable": True},
            {"id": "4.2", "text": "Sistem Proteksi Mesin (Guard, Interlock)", "repeatable": True},
            {"id": "4.3", "text": "Pemantauan Kondisi Mesin", "repeatable": True},
            {"id": "4.4", "text": "Sistem Proteksi Kebakaran", "repeatable": True},
            {"id": "4.5", "text": "Sistem Deteksi & Pemadaman Api Otomatis", "repeatable": True},
        ),
    },

    # ---------- 5 ----------
    {
        "title": "5. Environmental Management & Compliance",
        "items": (
            {"id": "5.1", "text": "Sistem Manajemen Lindi", "repeatable": True},
            {"id": "5.2", "text": "Pengendalian Emisi Debu & Bau", "repeatable": True},
            {"id": "5.3", "text": "Manajemen Limbah B3 & Residu", "repeatable": True},
            {"id": "5.4", "text": "Kepatuhan terhadap Izin Lingkungan", "repeatable": True},
        ),
    },

    # ---------- 6 ----------
    {
        "title": "6. Emergency Preparedness",
        "items": (
            {"id": "6.1", "text": "Prosedur Tanggap Darurat (ERP)", "repeatable": True},
            {"id": "6.2", "text": "Sistem Alarm & Komunikasi Darurat", "repeatable": True},
            {"id": "6.3", "text": "Pelatihan & Simulasi Tanggap Darurat", "repeatable": True},
            {"id": "6.4", "text": "Ketersediaan APAR & Hidran", "repeatable": True},
        ),
    },
)
