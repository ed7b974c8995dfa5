"""Sample purchase orders shown by the dashboard."""

from fabric_dashboard.models.order import FabricOrder

SAMPLE_ORDERS: list[FabricOrder] = [
    FabricOrder(
        id="1",
        model_name="LOSKA",
        order_no="801993",
        order_deadline="15.04.2022",
        season="S2",
        quality="40/1 LYC KAŞKORSE DÜZ BOYA",
        usage_area="ANA BEDEN + AĞ BİYE + YAKA BİYE",
        color="FFM DULL GREEN - 15-5812 TCX",
        fabric_code="1030145094",
        order_quantity=3850,
        weight_gsm=69,
        pp_status="PP İŞLEMDE",
        requirement_kg=266,
        supplier="TÜBAŞ",
        price=156,
        sap_order_code="4500631052",
        order_created_at="18.01.2022",
        sas_deadline="28.02.2022",
        remaining_time="1396,00",
        lab_ok="OK",
        notes="RENK OK LEKEDEN DOLAYI TAMİR",
    ),
    FabricOrder(
        id="2",
        model_name="LORES",
        order_no="801995",
        order_deadline="18.04.2022",
        season="S2",
        quality="36/1 LYC SÜPREM METRAJ BASKILI",
        usage_area="BODY - ANA BEDEN",
        color="LFH LIGHT GREEN",
        fabric_code="1030145118",
        order_quantity=9053,
        weight_gsm=53,
        pp_status="PP YAPILACAK",
        requirement_kg=480,
        supplier="TÜBAŞ",
        price=168,
        sap_order_code="4500631074",
        order_created_at="18.01.2022",
        sas_deadline="24.02.2022",
        remaining_time="1400,00",
        cad_ok="OK",
        variant_ok="23.02 VARYANT ONAYDA",
        fabric_test="03.03 TESTE VERİLDİ.",
    ),
    FabricOrder(
        id="3",
        model_name="ALZAR",
        order_no="802023",
        order_deadline="15.04.2022",
        season="S2",
        quality="36/1 RİBANA DÜZ BOYA",
        usage_area="BODY - ANA BEDEN + AĞ BİYE",
        color="FXT PASTEL GREEN 13-6110 TCX",
        fabric_code="1030145168",
        order_quantity=2944,
        weight_gsm=66,
        pp_status="OK",
        requirement_kg=194,
        supplier="TÜBAŞ",
        price=138,
        sap_order_code="4500631295",
        order_created_at="18.01.2022",
        sas_deadline="14.02.2022",
        remaining_time="1410,00",
        lab_ok="OK",
        fabric_test="09.02 verildi.",
        notes="HAZIR",
    ),
    FabricOrder(
        id="4",
        model_name="HOTEP",
        order_no="802482",
        order_deadline="13.05.2022",
        season="S2",
        quality="36/1 RİBANA METRAJ BASKILI",
        usage_area="ŞORT - ANA BEDEN + FIRFIR",
        color="LU9 LIGHT YELLOW PRINTED",
        fabric_code="1030145173",
        order_quantity=3500,
        weight_gsm=58,
        pp_status="PP YAPILACAK",
        requirement_kg=203,
        supplier="TÜBAŞ",
        price=161.5,
        sap_order_code="4500631282",
        order_created_at="18.01.2022",
        sas_deadline="23.02.2022",
        remaining_time="1401,00",
        lab_ok="OK",
        cad_ok="OK",
        variant_ok="09.02.2022 ONAY VERİLDİ.",
        fabric_test="01.03 teste verildi.",
    ),
    FabricOrder(
        id="5",
        model_name="BEGOR",
        order_no="811340",
        order_deadline="03.06.2022",
        season="W2",
        quality="30/1 4*2 LYC KAŞKORSE METRAJ BASKILI",
        usage_area="BODY - ANA BEDEN + AĞ BİYE + FIRFIR",
        color="LRF LIGHT GREEN PRINTED",
        fabric_code="1030137194",
        order_quantity=6160,
        weight_gsm=111,
        pp_status="",
        requirement_kg=684,
        supplier="TÜBAŞ",
        price=161,
        sap_order_code="4500640803",
        order_created_at="11.02.2022",
        sas_deadline="18.03.2022",
        remaining_time="1378,00",
        lab_ok="OK",
        cad_ok="OK",
        variant_ok="22.03 OK",
        notes="30.03 ÇARŞAMBA DEPO SEVK",
    ),
]
