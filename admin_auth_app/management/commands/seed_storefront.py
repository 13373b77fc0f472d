from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Category, Product, ProductColor, ProductImage

ADMIN = {"email": "admin@qimma.sa", "password": "admin123"}

CATEGORIES = [
    ("modern-kitchens", "مطابخ عصرية"),
    ("classic-kitchens", "مطابخ كلاسيكية"),
    ("small-kitchens", "مطابخ صغيرة"),
    ("luxury-kitchens", "مطابخ فاخرة"),
]

PLACEHOLDER_IMAGES = [
    "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1556909172-54557c7e4fb7?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1565538810643-b5bdb714032a?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600585152220-90363fe7e115?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600607687939-ce8a6c25118c?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600566753190-17f0baa2a6c3?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600573472592-401b489a3cdc?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600566752355-35792bedcfea?w=800&h=600&fit=crop",
    "https://images.unsplash.com/photo-1600585152915-d208bec867a1?w=800&h=600&fit=crop",
]

# (title, description, category slug, material, price per meter or None, custom price, featured, colors)
PRODUCTS = [
    ("مطبخ ألمنيوم عصري",
     "مطبخ عصري مصنوع من الألمنيوم عالي الجودة مع تشطيبات ممتازة وتصميم أنيق يناسب المنازل الحديثة",
     "modern-kitchens", "ألمنيوم", "1500", False, True, ["أبيض", "فضي", "رمادي"]),
    ("مطبخ خشب طبيعي",
     "مطبخ من الخشب الطبيعي الفاخر مع تشطيبات يدوية دقيقة ولمسة كلاسيكية راقية",
     "classic-kitchens", "خشب", "2200", False, True, ["بني فاتح", "بني غامق", "أوك"]),
    ("مطبخ صاج مقاوم للصدأ",
     "مطبخ صاج عالي الجودة مقاوم للصدأ والرطوبة مثالي للمطابخ التجارية والمنزلية",
     "small-kitchens", "صاج", "1200", False, False, ["فضي", "أسود"]),
    ("مطبخ فورميكا اقتصادي",
     "مطبخ فورميكا عملي واقتصادي مع خيارات ألوان متعددة وسهولة في الصيانة",
     "small-kitchens", "فورميكا", "800", False, False, ["أبيض", "كريمي", "بيج"]),
    ("مطبخ ألمنيوم فاخر",
     "مطبخ ألمنيوم فاخر مع إضاءة LED مدمجة وأدراج ناعمة الإغلاق وتصميم إيطالي",
     "luxury-kitchens", "ألمنيوم", "2500", False, True, ["أبيض لامع", "أسود مطفي", "ذهبي"]),
    ("مطبخ خشب زان طبيعي",
     "مطبخ من خشب الزان الطبيعي الأصلي مع رخام طبيعي وتفاصيل نحاسية أنيقة",
     "luxury-kitchens", "خشب", None, True, True, ["زان طبيعي", "ماهوجني"]),
    ("مطبخ صاج مودرن",
     "تصميم حديث من الصاج المعالج مع زجاج ملون وإضاءة جانبية",
     "modern-kitchens", "صاج", "1800", False, False, ["رمادي", "أزرق"]),
    ("مطبخ فورميكا حديث",
     "مطبخ فورميكا بتصميم عصري وألوان جريئة مناسب للشباب والعائلات الصغيرة",
     "modern-kitchens", "فورميكا", "950", False, False, ["أخضر", "أزرق", "برتقالي"]),
    ("مطبخ ألمنيوم كلاسيكي",
     "مطبخ ألمنيوم بلمسة كلاسيكية راقية مع مقابض نحاسية وزجاج منقوش",
     "classic-kitchens", "ألمنيوم", "1700", False, False, ["أبيض عاجي", "ذهبي عتيق"]),
    ("مطبخ خشب أمريكي",
     "مطبخ من خشب البلوط الأمريكي مع سطح جرانيت وتجهيزات ألمانية",
     "luxury-kitchens", "خشب", "3200", False, True, ["بلوط طبيعي", "بلوط مدخن"]),
]


class Command(BaseCommand):
    help = "Create the admin account and the demo catalog (safe to run repeatedly)."

    def handle(self, *args, **options):
        self._seed_admin()
        self._seed_catalog()
        self.stdout.write(self.style.SUCCESS("Storefront data ready."))

    def _seed_admin(self):
        User = get_user_model()
        user, created = User.objects.get_or_create(
            username=ADMIN["email"],
            defaults={"email": ADMIN["email"], "is_staff": True, "is_superuser": True},
        )
        if created:
            user.set_password(ADMIN["password"])
            user.save(update_fields=["password"])
            self.stdout.write(self.style.SUCCESS(f"Created admin '{user.email}'"))
        else:
            self.stdout.write(f"Admin '{user.email}' already exists")

    @transaction.atomic
    def _seed_catalog(self):
        if Category.objects.exists():
            self.stdout.write("Catalog already exists")
            return

        categories = {
            slug: Category.objects.create(slug=slug, name_ar=name)
            for slug, name in CATEGORIES
        }
        self.stdout.write(self.style.SUCCESS(f"Created {len(categories)} categories"))

        for i, (title, description, slug, material, price, custom, featured, colors) in enumerate(PRODUCTS):
            product = Product.objects.create(
                title_ar=title,
                description_ar=description,
                category=categories[slug],
                material_type=material,
                price_per_meter=price,
                is_custom_price=custom,
                is_featured=featured,
            )
            ProductImage.objects.bulk_create([
                ProductImage(product=product, url=PLACEHOLDER_IMAGES[i]),
                ProductImage(product=product, url=PLACEHOLDER_IMAGES[(i + 1) % len(PLACEHOLDER_IMAGES)]),
            ])
            ProductColor.objects.bulk_create(
                [ProductColor(product=product, color_name_ar=color) for color in colors]
            )

        self.stdout.write(self.style.SUCCESS(f"Created {len(PRODUCTS)} products with images and colors"))
