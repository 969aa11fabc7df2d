"""
Hand-authored pages indexed as rights information.
"""

from typing import List

from .source_records import StaticPageRecord

RIGHTS_PAGES: List[StaticPageRecord] = [
    StaticPageRecord(
        id="miranda",
        title="Miranda Rights",
        title_es="Derechos Miranda",
        content=(
            "Your right to remain silent: anything you say can and will be used against you "
            "in a court of law. Right to an attorney. If you cannot afford an attorney, one will "
            "be appointed for you. Invoke your right to remain silent by clearly saying "
            "\"I am invoking my right to remain silent.\" Do not answer police questions without "
            "an attorney. Miranda warning must be given before custodial interrogation. Fifth "
            "Amendment protection against self-incrimination. Sixth Amendment right to counsel."
        ),
        tags=["miranda", "right to remain silent", "fifth amendment", "sixth amendment",
              "attorney", "custodial interrogation", "police questioning"],
        aliases=["miranda rights", "miranda warning", "right to remain silent", "plead the fifth",
                 "remain silent", "do not talk to police", "police questioning rights"],
        url="/rights-info#miranda",
    ),
    StaticPageRecord(
        id="search-seizure",
        title="Search and Seizure Rights",
        title_es="Derechos de Registro e Incautación",
        content=(
            "Fourth Amendment protections against unreasonable searches and seizures. Police "
            "generally need a warrant signed by a judge to search your home, your phone, or your "
            "belongings. You have the right to refuse consent to a search. Stop and frisk: police "
            "can briefly stop you on the street if they have reasonable suspicion, and pat down for "
            "weapons only. Vehicle search: police can search your car without a warrant if they "
            "have probable cause. Phone search: police need a warrant to search your cell phone, "
            "Riley v. California (2014). Home search: refuse entry without a warrant signed by a "
            "judge. Do not physically resist a search even if it is unlawful; object verbally and "
            "raise it in court."
        ),
        tags=["search", "seizure", "fourth amendment", "warrant", "police", "phone search",
              "cell phone", "digital privacy", "stop and frisk", "vehicle search", "home search",
              "consent", "traffic stop", "refuse search"],
        aliases=["police search", "can police search", "phone search", "cell phone search",
                 "can police search my phone", "stop and frisk", "traffic stop search",
                 "home search warrant", "search my car", "refuse search", "fourth amendment rights"],
        url="/search-seizure",
    ),
    StaticPageRecord(
        id="attorney",
        title="Right to an Attorney",
        title_es="Derecho a un Abogado",
        content=(
            "Sixth Amendment right to counsel. You have the right to an attorney at all critical "
            "stages of a criminal prosecution. If you cannot afford an attorney, a public defender "
            "will be appointed. Request an attorney immediately upon arrest or during questioning. "
            "Say clearly: \"I want a lawyer.\" Do not answer questions until your attorney is "
            "present. Public defender offices provide free legal representation to those who "
            "qualify financially."
        ),
        tags=["attorney", "lawyer", "public defender", "sixth amendment", "right to counsel",
              "free attorney"],
        aliases=["right to attorney", "right to a lawyer", "public defender", "free lawyer",
                 "can i get a free lawyer", "appointed attorney", "i want a lawyer"],
        url="/rights-info#attorney",
    ),
    StaticPageRecord(
        id="speedy-trial",
        title="Right to a Speedy Trial",
        title_es="Derecho a un Juicio Rápido",
        content=(
            "Sixth Amendment speedy trial rights. The government must bring your case to trial "
            "within a reasonable time. The Speedy Trial Act sets time limits in federal cases. "
            "State laws vary. Unreasonable delay can result in dismissal of charges. Speedy trial "
            "rights protect against prolonged pretrial detention."
        ),
        tags=["speedy trial", "sixth amendment", "trial rights", "time limits", "dismissal"],
        aliases=["speedy trial rights", "how long can they hold me", "trial delay",
                 "right to fast trial"],
        url="/rights-info#speedy-trial",
    ),
    StaticPageRecord(
        id="jury",
        title="Right to a Jury Trial",
        title_es="Derecho a un Juicio con Jurado",
        content=(
            "Sixth Amendment right to trial by jury for serious offenses. The jury must "
            "unanimously agree on a verdict. You can waive your right to a jury trial and elect a "
            "bench trial before a judge only. In federal court and most state courts, felony "
            "charges carry the right to a jury trial. Misdemeanor right to jury trial varies by state."
        ),
        tags=["jury trial", "sixth amendment", "trial rights", "bench trial", "verdict"],
        aliases=["jury trial rights", "right to jury", "bench trial", "trial by jury"],
        url="/rights-info#jury",
    ),
]

SEARCH_SEIZURE_SCENARIOS: List[StaticPageRecord] = [
    StaticPageRecord(
        id="phone-search",
        title="Phone Search Rights",
        title_es="Derechos en Registro de Teléfono",
        content=(
            "Police need a warrant to search your cell phone or smartphone. In Riley v. California "
            "(2014) the Supreme Court unanimously ruled that police cannot search your phone "
            "without a warrant. You are not required to provide your passcode or PIN to police. "
            "Police may attempt to compel biometric unlock, but your passcode is protected. Your "
            "phone has stronger Fourth Amendment protection than physical items. Do not "
            "voluntarily hand over your phone. You can say: \"I do not consent to a search of my phone.\""
        ),
        tags=["phone search", "cell phone", "digital privacy", "fourth amendment", "warrant",
              "passcode", "biometric", "smartphone", "riley v california"],
        aliases=["can police search my phone", "cell phone search", "phone passcode",
                 "digital device search", "phone privacy", "search my phone",
                 "unlock phone for police", "phone warrant"],
        url="/search-seizure#phone-search",
    ),
    StaticPageRecord(
        id="stop-frisk",
        title="Stop and Frisk Rights",
        title_es="Derechos en Parada y Cacheo",
        content=(
            "Terry stop: police can briefly detain you on the street if they have reasonable "
            "suspicion of criminal activity. A hunch or your appearance alone is not enough. "
            "Police may pat down your outer clothing only if they have reasonable suspicion you are "
            "armed and dangerous. You have the right to ask \"Am I free to go?\" and if the answer "
            "is yes, calmly walk away. Do not physically resist the stop even if it is unlawful. "
            "Terry v. Ohio established stop-and-frisk law."
        ),
        tags=["stop and frisk", "terry stop", "pat down", "police stop", "reasonable suspicion",
              "fourth amendment", "street stop"],
        aliases=["stop and frisk", "pat down", "police pat down", "can police stop me",
                 "terry stop", "street stop", "am i free to go", "police detain me"],
        url="/search-seizure#stop-frisk",
    ),
    StaticPageRecord(
        id="vehicle-search",
        title="Vehicle Search Rights",
        title_es="Derechos en Registro de Vehículo",
        content=(
            "During a traffic stop, police can search your car without a warrant if they have "
            "probable cause, for example contraband in plain view or other specific facts "
            "suggesting evidence of a crime. You have the right to refuse consent to a vehicle "
            "search. Refusing consent is not grounds for arrest. Do not physically resist. If you "
            "consent, you cannot take it back. You can say: \"I do not consent to a search of my vehicle.\""
        ),
        tags=["vehicle search", "car search", "traffic stop", "probable cause", "consent",
              "fourth amendment", "plain view", "automobile"],
        aliases=["can police search my car", "car search", "vehicle search rights",
                 "traffic stop search", "pulled over search", "search my vehicle",
                 "car stopped by police"],
        url="/search-seizure#vehicle-search",
    ),
    StaticPageRecord(
        id="home-search",
        title="Home Search Rights",
        title_es="Derechos en Registro del Hogar",
        content=(
            "Police need a search warrant signed by a judge to enter and search your home. You "
            "have the right to refuse entry without a valid judicial warrant. Ask to see the "
            "warrant through the window or have it slipped under the door. Police may enter "
            "without a warrant in genuine emergencies such as hot pursuit or imminent destruction "
            "of evidence. An ICE administrative warrant (Form I-200 or I-205) is not a judicial "
            "warrant and does not give police the right to enter. Anything you say at the door can "
            "be used against you."
        ),
        tags=["home search", "house search", "warrant", "fourth amendment", "search warrant",
              "residence", "door", "judicial warrant", "exigent circumstances"],
        aliases=["can police enter my home", "home search warrant", "house search",
                 "search my home", "police at my door", "do i have to let police in",
                 "police knock door"],
        url="/search-seizure#home-search",
    ),
    StaticPageRecord(
        id="person-search",
        title="Search of Person Rights",
        title_es="Derechos en Registro Personal",
        content=(
            "Police may search your person incident to a lawful arrest without a separate warrant. "
            "Strip searches require more than an ordinary arrest and must be conducted in private "
            "by an officer of the same sex. A body cavity search requires a warrant or court order "
            "except in very limited circumstances. Do not physically resist a search. You can "
            "object verbally: \"I do not consent to this search.\" Document everything afterward "
            "and raise it with your attorney."
        ),
        tags=["search of person", "strip search", "body search", "fourth amendment",
              "search incident to arrest", "pat down", "personal search"],
        aliases=["can police search me", "search my body", "strip search rights",
                 "personal search rights", "being searched by police"],
        url="/search-seizure#person-search",
    ),
]

IMMIGRATION_PAGES: List[StaticPageRecord] = [
    StaticPageRecord(
        id="immigration-know-your-rights",
        title="Immigration Know Your Rights",
        title_es="Conozca Sus Derechos de Inmigración",
        content=(
            "Know your rights during ICE encounters. Judicial warrants vs administrative warrants. "
            "You have the right to remain silent. Do not open the door without a judicial warrant "
            "signed by a judge. Administrative warrants (Form I-200, I-205) do not allow entry into "
            "your home. Ask to see the warrant through the window or slipped under the door."
        ),
        tags=["immigration", "ICE", "warrant", "judicial warrant", "administrative warrant", "rights"],
        aliases=["ICE raid", "immigration enforcement", "deportation"],
        url="/immigration-guidance/know-your-rights",
    ),
    StaticPageRecord(
        id="immigration-workplace-raids",
        title="Workplace Raids",
        title_es="Redadas en el Lugar de Trabajo",
        content=(
            "What to do during a workplace ICE raid. Your rights at work. Do not run. Remain calm. "
            "You have the right to remain silent. Do not sign anything without an attorney."
        ),
        tags=["immigration", "ICE", "workplace", "raid", "employer"],
        aliases=["ICE raid", "work raid"],
        url="/immigration-guidance/workplace-raids",
    ),
    StaticPageRecord(
        id="immigration-daca-tps",
        title="DACA and TPS Information",
        title_es="Información sobre DACA y TPS",
        content=(
            "Deferred Action for Childhood Arrivals (DACA) and Temporary Protected Status (TPS). "
            "Eligibility requirements, renewal process, and current status updates."
        ),
        tags=["immigration", "DACA", "TPS", "dreamers", "work permit"],
        aliases=["dreamers", "deferred action", "temporary protected status"],
        url="/immigration-guidance/daca-tps",
    ),
    StaticPageRecord(
        id="immigration-bond-hearings",
        title="Immigration Bond Hearings",
        title_es="Audiencias de Fianza de Inmigración",
        content=(
            "Immigration bond hearing process. How to request bond. Factors judges consider. "
            "Preparing for your bond hearing."
        ),
        tags=["immigration", "bond", "detention", "hearing", "release"],
        aliases=["immigration bail", "detention release"],
        url="/immigration-guidance/bond-hearings",
    ),
    StaticPageRecord(
        id="immigration-family-planning",
        title="Family Immigration Planning",
        title_es="Planificación Familiar de Inmigración",
        content=(
            "Emergency family planning for immigration enforcement. Power of attorney. Childcare "
            "arrangements. Document preparation."
        ),
        tags=["immigration", "family", "children", "emergency plan"],
        aliases=["family separation", "child custody"],
        url="/immigration-guidance/family-planning",
    ),
    StaticPageRecord(
        id="immigration-find-attorney",
        title="Find an Immigration Attorney",
        title_es="Encontrar un Abogado de Inmigración",
        content=(
            "How to find free or low-cost immigration legal help. Legal aid organizations. "
            "Pro bono attorneys. Avoiding notario fraud."
        ),
        tags=["immigration", "attorney", "lawyer", "legal aid"],
        aliases=["immigration lawyer", "legal help"],
        url="/immigration-guidance/find-attorney",
    ),
    StaticPageRecord(
        id="immigration-find-detained",
        title="Find a Detained Person",
        title_es="Encontrar a una Persona Detenida",
        content=(
            "How to locate someone in immigration detention. ICE detainee locator. Detention "
            "facility information. Visitation rights."
        ),
        tags=["immigration", "detention", "ICE", "locator"],
        aliases=["ICE detention", "detained immigrant"],
        url="/immigration-guidance/find-detained",
    ),
    StaticPageRecord(
        id="immigration-raids-toolkit",
        title="ICE Raids Toolkit",
        title_es="Kit de Herramientas para Redadas de ICE",
        content=(
            "Complete toolkit for ICE raid preparation. Red cards. Emergency contacts. Family "
            "safety plan. Community rapid response."
        ),
        tags=["immigration", "ICE", "raid", "emergency", "toolkit"],
        aliases=["raid preparation", "ICE enforcement"],
        url="/immigration-guidance/raids-toolkit",
    ),
]

SITE_PAGES: List[StaticPageRecord] = [
    StaticPageRecord(
        id="page-home",
        title="Public Defender Legal Guidance",
        title_es="Orientación Legal del Defensor Público",
        content=(
            "Free legal guidance and rights information. Assistance for criminal defense. "
            "Know your rights. Find legal resources."
        ),
        tags=["home", "legal aid", "public defender", "rights"],
        aliases=["main", "start"],
        url="/",
    ),
    StaticPageRecord(
        id="page-rights-info",
        title="Know Your Rights",
        title_es="Conozca Sus Derechos",
        content=(
            "Understanding your constitutional rights. Miranda rights. Right to remain silent. "
            "Right to an attorney. Protection against unreasonable searches."
        ),
        tags=["rights", "constitution", "miranda", "attorney"],
        aliases=["constitutional rights", "civil rights"],
        url="/rights-info",
    ),
    StaticPageRecord(
        id="page-court-locator",
        title="Court and Resource Locator",
        title_es="Localizador de Tribunales y Recursos",
        content=(
            "Find courts, legal aid offices, and public defender offices near you. Locate legal "
            "resources in your area."
        ),
        tags=["court", "locator", "legal aid", "public defender"],
        aliases=["find court", "courthouse", "legal help near me"],
        url="/court-locator",
    ),
    StaticPageRecord(
        id="page-immigration-hub",
        title="Immigration Guidance Hub",
        title_es="Centro de Orientación de Inmigración",
        content=(
            "Comprehensive immigration resources. Know your rights. ICE encounters. DACA and TPS. "
            "Finding legal help."
        ),
        tags=["immigration", "ICE", "DACA", "TPS", "deportation"],
        aliases=["immigrant rights", "undocumented"],
        url="/immigration-guidance",
    ),
    StaticPageRecord(
        id="page-court-records",
        title="Court Records Search",
        title_es="Búsqueda de Registros Judiciales",
        content="Search federal court records. PACER and RECAP access. Find case documents and dockets.",
        tags=["court records", "PACER", "RECAP", "docket", "case search"],
        aliases=["case lookup", "docket search", "federal courts"],
        url="/court-records",
    ),
    StaticPageRecord(
        id="page-friends-family",
        title="Resources for Friends and Family",
        title_es="Recursos para Amigos y Familia",
        content=(
            "How to support a loved one facing charges. Bail information. Court dates. Finding an "
            "attorney. Emotional support resources."
        ),
        tags=["family", "support", "loved one", "bail", "visiting"],
        aliases=["help family member", "loved one arrested"],
        url="/friends-family",
    ),
    StaticPageRecord(
        id="page-statutes",
        title="Statute Search",
        title_es="Búsqueda de Estatutos",
        content=(
            "Search federal and state criminal statutes. Find laws by jurisdiction. Penalty "
            "information. Legal definitions."
        ),
        tags=["statutes", "laws", "criminal code", "penalties"],
        aliases=["criminal law", "penal code", "legal code"],
        url="/statutes",
    ),
    StaticPageRecord(
        id="page-resources",
        title="Legal Resources",
        title_es="Recursos Legales",
        content=(
            "Comprehensive legal resources. Legal aid organizations. Pro bono attorneys. "
            "Self-help legal information."
        ),
        tags=["resources", "legal aid", "help", "assistance"],
        aliases=["legal help", "free legal"],
        url="/resources",
    ),
    StaticPageRecord(
        id="page-process",
        title="Court Process Guide",
        title_es="Guía del Proceso Judicial",
        content=(
            "Understanding the court process. Arraignment. Bail hearings. Pretrial. Plea deals. "
            "Trial. Sentencing. Mock Q&A practice."
        ),
        tags=["court process", "arraignment", "trial", "sentencing", "plea"],
        aliases=["what to expect", "court steps"],
        url="/process",
    ),
    StaticPageRecord(
        id="page-case-timeline",
        title="Criminal Case Timeline",
        title_es="Cronología del Caso Penal",
        content=(
            "Interactive 7-stage criminal case timeline. Arrest, arraignment, pretrial, plea "
            "bargaining, trial, sentencing, and appeal. Understand each stage of a criminal "
            "proceeding, your rights, and what to expect."
        ),
        tags=["timeline", "case stages", "criminal process", "arraignment", "trial",
              "sentencing", "appeal", "arrest"],
        aliases=["case stages", "criminal procedure", "court process timeline",
                 "what happens after arrest"],
        url="/case-timeline",
    ),
    StaticPageRecord(
        id="page-quick-reference",
        title="Quick Reference Rights Cards",
        title_es="Tarjetas de Referencia Rápida de Derechos",
        content=(
            "Printable rights reference cards. Know your rights during police encounters, traffic "
            "stops, arrests, arraignment, bail hearings, and court appearances."
        ),
        tags=["quick reference", "rights cards", "printable", "police encounter", "traffic stop",
              "arrest rights"],
        aliases=["rights card", "pocket card", "printable rights", "cheat sheet"],
        url="/quick-reference",
    ),
    StaticPageRecord(
        id="page-diversion-programs-hub",
        title="Diversion Programs Directory",
        title_es="Directorio de Programas de Diversión",
        content=(
            "Find diversion and alternative sentencing programs in your area. Drug courts, mental "
            "health courts, veteran courts, community service, and pretrial intervention programs."
        ),
        tags=["diversion", "alternative sentencing", "drug court", "mental health court",
              "veteran court", "community service"],
        aliases=["alternative to jail", "drug program", "first offender program",
                 "pretrial diversion"],
        url="/diversion-programs",
    ),
    StaticPageRecord(
        id="page-record-expungement-hub",
        title="Record Expungement Guide",
        title_es="Guía de Eliminación de Antecedentes",
        content=(
            "Learn how to clear your criminal record. Expungement eligibility by state. Record "
            "sealing. Certificates of rehabilitation. Clean slate laws."
        ),
        tags=["expungement", "record clearing", "record sealing", "clean slate", "rehabilitation"],
        aliases=["clear record", "erase criminal record", "second chance", "record removal"],
        url="/record-expungement",
    ),
    StaticPageRecord(
        id="page-legal-glossary-hub",
        title="Legal Glossary",
        title_es="Glosario Legal",
        content=(
            "Legal glossary with plain-language definitions. Understand legal terms, court "
            "terminology, and criminal justice vocabulary."
        ),
        tags=["glossary", "legal terms", "definitions", "vocabulary", "terminology"],
        aliases=["legal dictionary", "law terms", "court terms", "legal definitions"],
        url="/legal-glossary",
    ),
    StaticPageRecord(
        id="page-support-hub",
        title="Support Resources Hub",
        title_es="Centro de Recursos de Apoyo",
        content=(
            "Find support resources for people involved in the criminal justice system. "
            "Employment, finances, court logistics, mental health, housing, and more."
        ),
        tags=["support", "resources", "help", "assistance", "reentry"],
        aliases=["get help", "support services", "reentry resources"],
        url="/support",
    ),
    StaticPageRecord(
        id="page-privacy-policy",
        title="Privacy Policy",
        title_es="Política de Privacidad",
        content=(
            "How we protect your data. Search queries are not stored. No personal information "
            "stored. Session-based privacy."
        ),
        tags=["privacy", "policy", "data", "security"],
        aliases=["data privacy", "privacy statement"],
        url="/privacy-policy",
    ),
    StaticPageRecord(
        id="page-disclaimers",
        title="Legal Disclaimers",
        title_es="Descargos de Responsabilidad",
        content=(
            "Not a substitute for legal counsel. Educational purposes only. Limitation of liability."
        ),
        tags=["disclaimer", "legal notice", "terms"],
        aliases=["terms of use", "legal notice", "not legal advice"],
        url="/disclaimers",
    ),
]

STATIC_PAGES: List[StaticPageRecord] = (
    RIGHTS_PAGES + SEARCH_SEIZURE_SCENARIOS + IMMIGRATION_PAGES + SITE_PAGES
)
