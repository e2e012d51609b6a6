# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.success": "نجاح",
    "dialog.confirm": "تأكيد",

    # Buttons
    "button.cancel": "إلغاء",
    "button.back": "السابق",
    "button.next": "التالي",
    "button.complete": "إنهاء",
    "button.add": "إضافة",
    "button.remove": "حذف",
    "button.browse": "اختيار ملف",
    "button.clear_all": "مسح الكل",
    "button.retry": "إعادة المحاولة",

    # Wizard shell
    "wizard.title": "إنشاء قالب جديد",
    "wizard.subtitle": "اتبع الخطوات التالية لإنشاء القالب",
    "wizard.step_of": "الخطوة {current} من {total}",
    "wizard.confirm_cancel": "هل أنت متأكد من الإلغاء؟ سيتم فقدان جميع البيانات المدخلة.",
    "wizard.submitting": "جاري إنشاء القالب...",
    "wizard.completed": "تم إنشاء القالب بنجاح.",
    "wizard.cancelled": "تم إلغاء إنشاء القالب.",
    "wizard.resume_draft": "تم العثور على قالب غير مكتمل. هل تريد المتابعة من حيث توقفت؟",

    # Step titles/descriptions
    "step.upload.title": "رفع الملف",
    "step.upload.description": "ارفع ملف القالب (PNG أو Figma)",
    "step.components.title": "تحديد المكونات",
    "step.components.description": "حدد المكونات التفاعلية لقوالب PNG",
    "step.metadata.title": "إعداد القالب",
    "step.metadata.description": "حدد اسم القالب ووصفه وفئته",
    "step.summary.title": "المراجعة والإرسال",
    "step.summary.description": "راجع جميع المعلومات قبل الإرسال",
    "step.completion.title": "اكتمال",
    "step.completion.description": "اكتمل إنشاء القالب",

    # Validation
    "validation.upload.file_required": "يرجى اختيار ملف القالب.",
    "validation.upload.not_uploaded": "يرجى الانتظار حتى اكتمال الرفع.",
    "validation.components.required": "حدد منطقة مكوّن واحدة على الأقل.",
    "validation.components.invalid": "منطقة المكوّن '{label}' ذات حجم أو نوع غير صالح.",
    "validation.metadata.name_required": "اسم القالب مطلوب.",
    "validation.metadata.name_too_long": "يجب ألا يتجاوز اسم القالب {max} حرفاً.",
    "validation.metadata.description_too_long": "يجب ألا يتجاوز الوصف {max} حرفاً.",
    "validation.metadata.category_required": "يرجى اختيار فئة.",
    "validation.metadata.too_many_tags": "الحد الأقصى {max} وسوم.",
    "validation.summary.confirm_required": "يرجى تأكيد صحة المعلومات.",
    "validation.completion.not_ready": "أكمل جميع الخطوات السابقة قبل الإرسال.",

    # Upload step
    "upload.hint": "اختر صورة PNG أو ملف Figma (.fig) بحجم أقصى {limit}.",
    "upload.no_file": "لم يتم اختيار ملف",
    "upload.status.initiating": "جاري تحضير الرفع...",
    "upload.status.uploading": "جاري رفع الملف...",
    "upload.status.finalizing": "جاري إنهاء الرفع...",
    "upload.status.done": "اكتمل الرفع",
    "upload.error.invalid_type": "يرجى اختيار صورة PNG أو ملف Figma (.fig)",
    "upload.error.empty_file": "الملف المختار فارغ.",
    "upload.error.too_large": "يجب أن يكون حجم الملف أقل من {limit}",
    "upload.error.read_failed": "تعذرت قراءة الملف المختار.",
    "upload.error.type_locked": "لا يمكن تغيير نوع الملف بعد اكتمال خطوة الرفع. أعد تعيين المعالج لاستخدام ملف مختلف.",
    "upload.file_dialog": "اختيار ملف القالب",
    "upload.file_filter": "ملفات القوالب (*.png *.fig)",

    # Component definition step
    "components.hint": "أدخل موضع وحجم كل منطقة تفاعلية على الصورة.",
    "components.empty": "لم يتم تحديد أي مكونات بعد",
    "components.confirm_clear": "هل أنت متأكد من مسح جميع المكونات؟",
    "components.field.x": "س",
    "components.field.y": "ص",
    "components.field.width": "العرض",
    "components.field.height": "الارتفاع",
    "components.field.type": "النوع",
    "components.field.label": "التسمية",

    # Metadata step
    "metadata.name": "اسم القالب",
    "metadata.description": "الوصف",
    "metadata.category": "الفئة",
    "metadata.select_category": "اختر فئة",
    "metadata.tags": "الوسوم",
    "metadata.tag_placeholder": "اكتب وسماً ثم اضغط إضافة",
    "metadata.no_tags": "لا توجد وسوم بعد",
    "metadata.categories_load_failed": "تعذر تحميل الفئات. أعد المحاولة أو أنشئ فئة جديدة.",
    "metadata.new_category": "فئة جديدة",
    "metadata.new_category_prompt": "اسم الفئة:",

    # Summary step
    "summary.file": "الملف",
    "summary.file_type": "نوع الملف",
    "summary.file_size": "حجم الملف",
    "summary.name": "الاسم",
    "summary.description": "الوصف",
    "summary.category": "الفئة",
    "summary.tags": "الوسوم",
    "summary.components": "المكونات",
    "summary.none": "لا يوجد",
    "summary.confirm": "لقد راجعت معلومات القالب",

    # Completion step
    "completion.ready": "كل شيء جاهز. اضغط إنهاء لإنشاء القالب.",
    "completion.success": "تم إنشاء القالب بنجاح!",
    "completion.template_id": "معرّف القالب: {id}",

    # API errors
    "error.api.connection": "خطأ في الاتصال. يرجى التحقق من اتصال الإنترنت.",
    "error.api.timeout": "انتهت مهلة الاتصال. يرجى المحاولة مرة أخرى.",
    "error.api.server": "خطأ في الخادم. يرجى الاتصال بالدعم الفني.",
    "error.api.unknown": "حدث خطأ غير متوقع. يرجى المحاولة مرة أخرى.",
    "error.upload.failed": "فشل رفع الملف",
    "error.step_view": "حدث خطأ في هذه الخطوة: {error}",
    "error.missing_step_data": "بعض المعلومات المطلوبة مفقودة ({step}).",
}
