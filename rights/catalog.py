"""
catalog – static rights content.

Holds the base card text per language and interaction type, the additive
per-state variations, and the reference tables (state names, emergency
numbers, interaction labels) used to render prompts and fallbacks.

The content is general awareness material, not legal advice.
"""
from __future__ import annotations


# ---------------------------------------------------------------------------
# Reference tables
# ---------------------------------------------------------------------------

US_STATES: tuple[str, ...] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)

STATE_NAMES: dict[str, str] = {
    "AL": "Alabama",        "AK": "Alaska",         "AZ": "Arizona",
    "AR": "Arkansas",       "CA": "California",     "CO": "Colorado",
    "CT": "Connecticut",    "DE": "Delaware",       "FL": "Florida",
    "GA": "Georgia",        "HI": "Hawaii",         "ID": "Idaho",
    "IL": "Illinois",       "IN": "Indiana",        "IA": "Iowa",
    "KS": "Kansas",         "KY": "Kentucky",       "LA": "Louisiana",
    "ME": "Maine",          "MD": "Maryland",       "MA": "Massachusetts",
    "MI": "Michigan",       "MN": "Minnesota",      "MS": "Mississippi",
    "MO": "Missouri",       "MT": "Montana",        "NE": "Nebraska",
    "NV": "Nevada",         "NH": "New Hampshire",  "NJ": "New Jersey",
    "NM": "New Mexico",     "NY": "New York",       "NC": "North Carolina",
    "ND": "North Dakota",   "OH": "Ohio",           "OK": "Oklahoma",
    "OR": "Oregon",         "PA": "Pennsylvania",   "RI": "Rhode Island",
    "SC": "South Carolina", "SD": "South Dakota",   "TN": "Tennessee",
    "TX": "Texas",          "UT": "Utah",           "VT": "Vermont",
    "VA": "Virginia",       "WA": "Washington",     "WV": "West Virginia",
    "WI": "Wisconsin",      "WY": "Wyoming",
}

EMERGENCY_NUMBERS: dict[str, str] = {
    "POLICE":                 "911",
    "ACLU":                   "1-212-549-2500",
    "LEGAL_AID":              "211",
    "NATIONAL_LAWYERS_GUILD": "1-415-285-1011",
}

INTERACTION_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "traffic_stop": "Traffic stop",
        "questioning":  "Police questioning",
        "home_search":  "Home search",
        "arrest":       "Arrest",
        "protest":      "Protest",
        "other":        "Police",
    },
    "es": {
        "traffic_stop": "parada de tráfico",
        "questioning":  "interrogatorio policial",
        "home_search":  "registro domiciliario",
        "arrest":       "arresto",
        "protest":      "protesta",
        "other":        "encuentro policial",
    },
}


# ---------------------------------------------------------------------------
# Base cards
# ---------------------------------------------------------------------------

_EN_CONTACTS = [
    "ACLU: 1-212-549-2500",
    "Legal Aid: 211",
    "National Lawyers Guild: 1-415-285-1011",
]

_ES_CONTACTS = [
    "ACLU: 1-212-549-2500",
    "Asistencia Legal: 211",
    "National Lawyers Guild: 1-415-285-1011",
]

BASE_CARDS: dict[str, dict[str, dict[str, object]]] = {
    "en": {
        "traffic_stop": {
            "title": "Traffic Stop Rights",
            "dos": [
                "Keep your hands visible at all times",
                "Remain calm and polite",
                "Provide license, registration, and insurance when asked",
                "You can remain silent beyond basic identification",
                "Inform passengers of their rights",
                "Ask if you are free to leave",
            ],
            "donts": [
                "Don't reach for anything without announcing it first",
                "Don't argue, resist, or run",
                "Don't consent to searches without a warrant",
                "Don't lie or provide false information",
                "Don't get out of the car unless ordered",
                "Don't touch the officer or their equipment",
            ],
            "key_rights": [
                "Right to remain silent (5th Amendment)",
                "Right to refuse consent to search (4th Amendment)",
                "Right to ask if you're free to leave",
                "Right to record the interaction",
                "Right to an attorney if arrested",
                "Right to know why you're being stopped",
            ],
            "emergency_contacts": _EN_CONTACTS,
            "legal_resources": [
                "ACLU Know Your Rights",
                "Electronic Frontier Foundation",
                "National Lawyers Guild",
            ],
            "phrases": [
                "I am exercising my right to remain silent",
                "I do not consent to any searches",
                "Am I free to leave?",
                "I would like to speak to an attorney",
                "I am recording this interaction for my safety",
            ],
            "responses": [
                "I understand, officer",
                "I am complying with your lawful orders",
                "I need to reach for my [license/registration/insurance]",
                "I prefer to remain silent",
            ],
            "emergency_phrases": [
                "I need medical attention",
                "I am having difficulty breathing",
                "I need to contact my attorney immediately",
                "I am being harmed",
            ],
        },
        "questioning": {
            "title": "Police Questioning Rights",
            "dos": [
                "Ask if you are free to leave",
                "Remain calm and polite",
                "Ask for identification if not in uniform",
                "Remember details for later",
                "Ask for a lawyer if arrested",
                "Provide only basic identification if required",
            ],
            "donts": [
                "Don't answer questions without a lawyer present",
                "Don't consent to searches",
                "Don't lie or provide false information",
                "Don't resist or argue",
                "Don't sign anything without reading",
                "Don't go anywhere voluntarily",
            ],
            "key_rights": [
                "Right to remain silent",
                "Right to leave if not detained",
                "Right to refuse to answer questions",
                "Right to an attorney",
                "Right to know if you're being detained",
                "Right to record the interaction",
            ],
            "emergency_contacts": _EN_CONTACTS[:2],
            "phrases": [
                "Am I free to leave?",
                "I am exercising my right to remain silent",
                "I do not wish to answer questions",
                "I want to speak to a lawyer",
                "I do not consent to any searches",
            ],
            "responses": [
                "I understand",
                "I prefer not to answer questions",
                "I would like to leave now",
                "I am recording this interaction",
            ],
        },
        "home_search": {
            "title": "Home Search Rights",
            "dos": [
                "Ask to see the warrant",
                "Read the warrant carefully",
                "Ask what they are looking for",
                "Remain calm and observe",
                "Take notes or record if possible",
                "Ask for a copy of the warrant",
            ],
            "donts": [
                "Don't consent to a search without a warrant",
                "Don't interfere with the search",
                "Don't answer questions without a lawyer",
                "Don't sign anything",
                "Don't let them expand beyond the warrant",
                "Don't leave them alone in your home",
            ],
            "key_rights": [
                "Right to see the warrant",
                "Right to refuse warrantless searches",
                "Right to remain silent",
                "Right to an attorney",
                "Right to observe the search",
                "Right to record the interaction",
            ],
            "phrases": [
                "I do not consent to a search",
                "May I see your warrant?",
                "I am exercising my right to remain silent",
                "I want to speak to my attorney",
                "I am recording this interaction",
            ],
            "responses": [
                "I understand you have a warrant",
                "I am not interfering with your search",
                "I prefer to remain silent",
                "I am observing for my protection",
            ],
        },
        "arrest": {
            "title": "Arrest Rights",
            "dos": [
                "Remain calm and don't resist",
                "Ask why you're being arrested",
                "Ask for a lawyer immediately",
                "Remember the Miranda rights",
                "Ask for medical attention if needed",
                "Try to remember badge numbers and details",
            ],
            "donts": [
                "Don't resist arrest",
                "Don't answer questions without a lawyer",
                "Don't sign anything",
                "Don't consent to searches",
                "Don't make any statements",
                "Don't argue about the arrest",
            ],
            "key_rights": [
                "Right to remain silent (Miranda rights)",
                "Right to an attorney",
                "Right to know charges against you",
                "Right to a phone call",
                "Right to medical attention",
                "Right to refuse to sign anything",
            ],
            "emergency_contacts": _EN_CONTACTS,
            "phrases": [
                "I am exercising my right to remain silent",
                "I want to speak to a lawyer",
                "I do not consent to any searches",
                "Why am I being arrested?",
                "I need medical attention",
            ],
            "responses": [
                "I understand I am under arrest",
                "I am not resisting",
                "I prefer to remain silent",
                "I want my attorney present",
            ],
        },
        "protest": {
            "title": "Protest Rights",
            "dos": [
                "Stay on public sidewalks, streets, and parks where assembly is allowed",
                "Carry identification and an emergency contact number",
                "Follow dispersal orders and ask which exit route to use",
                "Write a lawyer's phone number on your arm",
                "Document what you see from a safe distance",
            ],
            "donts": [
                "Don't block building entrances or traffic without a permit",
                "Don't resist or physically engage with officers",
                "Don't unlock your phone or share passcodes",
                "Don't consent to searches of your bag or phone",
                "Don't carry anything that could be treated as a weapon",
            ],
            "key_rights": [
                "Right to free speech and peaceful assembly (1st Amendment)",
                "Right to photograph and record anything in plain view in public",
                "Right to remain silent",
                "Right to refuse consent to search",
                "Right to an attorney if detained or arrested",
            ],
            "emergency_contacts": _EN_CONTACTS,
            "legal_resources": [
                "ACLU Protesters' Rights",
                "National Lawyers Guild Legal Observers",
            ],
            "phrases": [
                "Am I being detained or am I free to go?",
                "I am exercising my right to remain silent",
                "I do not consent to any searches",
                "I want to speak to a lawyer",
            ],
            "responses": [
                "I am leaving the area now",
                "Which way should I go to comply with the order?",
                "I am recording for my safety",
            ],
        },
        "other": {
            "title": "Your Rights With Police",
            "dos": [
                "Remain calm and polite",
                "Keep your hands where they can be seen",
                "Ask if you are free to leave",
                "Remember badge numbers and patrol car numbers",
                "Write down everything you remember as soon as possible",
            ],
            "donts": [
                "Don't run, resist, or obstruct officers",
                "Don't lie or give false documents",
                "Don't consent to searches",
                "Don't make statements without a lawyer",
            ],
            "key_rights": [
                "Right to remain silent",
                "Right to refuse consent to search",
                "Right to an attorney",
                "Right to record police in public",
                "Right to file a complaint about misconduct",
            ],
            "emergency_contacts": _EN_CONTACTS,
            "phrases": [
                "Am I free to leave?",
                "I am exercising my right to remain silent",
                "I do not consent to any searches",
                "I would like to speak to an attorney",
            ],
            "responses": [
                "I understand",
                "I prefer to remain silent",
                "I am recording this interaction",
            ],
        },
    },
    "es": {
        "traffic_stop": {
            "title": "Derechos Durante una Parada de Tráfico",
            "dos": [
                "Mantén las manos visibles en todo momento",
                "Mantén la calma y sé cortés",
                "Proporciona licencia, registro y seguro cuando se solicite",
                "Puedes permanecer en silencio más allá de la identificación básica",
            ],
            "donts": [
                "No busques nada sin anunciarlo primero",
                "No discutas, resistas o huyas",
                "No consientas a registros sin una orden judicial",
                "No mientas o proporciones información falsa",
            ],
            "key_rights": [
                "Derecho a permanecer en silencio",
                "Derecho a rechazar el consentimiento para registros",
                "Derecho a preguntar si eres libre de irte",
                "Derecho a grabar la interacción",
            ],
            "emergency_contacts": _ES_CONTACTS,
            "phrases": [
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "No consiento a ningún registro",
                "¿Soy libre de irme?",
                "Me gustaría hablar con un abogado",
            ],
            "responses": [
                "Entiendo, oficial",
                "Estoy cumpliendo con sus órdenes legales",
                "Estoy grabando esta interacción para mi seguridad",
            ],
        },
        "questioning": {
            "title": "Derechos Durante un Interrogatorio Policial",
            "dos": [
                "Pregunta si eres libre de irte",
                "Mantén la calma y sé cortés",
                "Pide identificación si el agente no está uniformado",
                "Recuerda los detalles para después",
            ],
            "donts": [
                "No respondas preguntas sin un abogado presente",
                "No consientas a registros",
                "No mientas o proporciones información falsa",
                "No firmes nada sin leerlo",
            ],
            "key_rights": [
                "Derecho a permanecer en silencio",
                "Derecho a irte si no estás detenido",
                "Derecho a negarte a responder preguntas",
                "Derecho a un abogado",
            ],
            "emergency_contacts": _ES_CONTACTS[:2],
            "phrases": [
                "¿Soy libre de irme?",
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "No deseo responder preguntas",
                "Quiero hablar con un abogado",
            ],
            "responses": [
                "Entiendo",
                "Prefiero no responder preguntas",
                "Me gustaría irme ahora",
            ],
        },
        "home_search": {
            "title": "Derechos Durante un Registro Domiciliario",
            "dos": [
                "Pide ver la orden judicial",
                "Lee la orden con cuidado",
                "Pregunta qué están buscando",
                "Mantén la calma y observa",
            ],
            "donts": [
                "No consientas a un registro sin una orden judicial",
                "No interfieras con el registro",
                "No respondas preguntas sin un abogado",
                "No firmes nada",
            ],
            "key_rights": [
                "Derecho a ver la orden judicial",
                "Derecho a rechazar registros sin orden",
                "Derecho a permanecer en silencio",
                "Derecho a observar el registro",
            ],
            "phrases": [
                "No consiento a un registro",
                "¿Puedo ver su orden judicial?",
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "Quiero hablar con mi abogado",
            ],
            "responses": [
                "Entiendo que tienen una orden",
                "No estoy interfiriendo con su registro",
                "Estoy observando para mi protección",
            ],
        },
        "arrest": {
            "title": "Derechos Durante un Arresto",
            "dos": [
                "Mantén la calma y no te resistas",
                "Pregunta por qué te están arrestando",
                "Pide un abogado de inmediato",
                "Pide atención médica si la necesitas",
            ],
            "donts": [
                "No te resistas al arresto",
                "No respondas preguntas sin un abogado",
                "No firmes nada",
                "No hagas declaraciones",
            ],
            "key_rights": [
                "Derecho a permanecer en silencio (derechos Miranda)",
                "Derecho a un abogado",
                "Derecho a conocer los cargos en tu contra",
                "Derecho a una llamada telefónica",
            ],
            "emergency_contacts": _ES_CONTACTS,
            "phrases": [
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "Quiero hablar con un abogado",
                "No consiento a ningún registro",
                "¿Por qué me están arrestando?",
            ],
            "responses": [
                "Entiendo que estoy arrestado",
                "No me estoy resistiendo",
                "Quiero que mi abogado esté presente",
            ],
        },
        "protest": {
            "title": "Derechos Durante una Protesta",
            "dos": [
                "Permanece en aceras, calles y parques donde se permite reunirse",
                "Lleva identificación y un número de contacto de emergencia",
                "Obedece las órdenes de dispersión y pregunta por dónde salir",
                "Documenta lo que ves desde una distancia segura",
            ],
            "donts": [
                "No bloquees entradas ni el tráfico sin permiso",
                "No te resistas ni forcejees con los agentes",
                "No desbloquees tu teléfono ni compartas contraseñas",
                "No consientas a registros de tu bolso o teléfono",
            ],
            "key_rights": [
                "Derecho a la libre expresión y reunión pacífica (Primera Enmienda)",
                "Derecho a fotografiar y grabar lo que está a la vista en público",
                "Derecho a permanecer en silencio",
                "Derecho a un abogado si te detienen",
            ],
            "emergency_contacts": _ES_CONTACTS,
            "phrases": [
                "¿Estoy detenido o soy libre de irme?",
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "No consiento a ningún registro",
                "Quiero hablar con un abogado",
            ],
            "responses": [
                "Me estoy retirando del área",
                "¿Por dónde debo ir para cumplir la orden?",
                "Estoy grabando para mi seguridad",
            ],
        },
        "other": {
            "title": "Tus Derechos Ante la Policía",
            "dos": [
                "Mantén la calma y sé cortés",
                "Mantén las manos a la vista",
                "Pregunta si eres libre de irte",
                "Anota todo lo que recuerdes lo antes posible",
            ],
            "donts": [
                "No huyas, te resistas ni obstruyas a los agentes",
                "No mientas ni entregues documentos falsos",
                "No consientas a registros",
                "No hagas declaraciones sin un abogado",
            ],
            "key_rights": [
                "Derecho a permanecer en silencio",
                "Derecho a rechazar el consentimiento para registros",
                "Derecho a un abogado",
                "Derecho a grabar a la policía en público",
            ],
            "emergency_contacts": _ES_CONTACTS,
            "phrases": [
                "¿Soy libre de irme?",
                "Estoy ejerciendo mi derecho a permanecer en silencio",
                "No consiento a ningún registro",
                "Me gustaría hablar con un abogado",
            ],
            "responses": [
                "Entiendo",
                "Prefiero permanecer en silencio",
                "Estoy grabando esta interacción",
            ],
        },
    },
}


# ---------------------------------------------------------------------------
# State variations
#   state code → interaction type → {"additional_rights", "additional_dos"}
#   Entries are English; they are appended regardless of card language.
# ---------------------------------------------------------------------------

STATE_VARIATIONS: dict[str, dict[str, dict[str, list[str]]]] = {
    "CA": {
        "traffic_stop": {
            "additional_rights": [
                "California law states that recording an officer in a public "
                "place is not, by itself, obstruction (Penal Code 148(g))",
            ],
            "additional_dos": [
                "Under California law, an officer must state the reason for the "
                "stop before asking questions (Vehicle Code 2806.5)",
            ],
        },
        "questioning": {
            "additional_rights": [
                "Minors in California must consult with a lawyer before a "
                "custodial interrogation (Welfare and Institutions Code 625.6)",
            ],
        },
    },
    "NY": {
        "traffic_stop": {
            "additional_rights": [
                "New York's Right to Record Act protects recording police "
                "activity (Civil Rights Law 79-p)",
            ],
        },
        "questioning": {
            "additional_rights": [
                "New York officers must identify themselves and explain the "
                "reason for a stop on request (Right to Know Act)",
            ],
            "additional_dos": [
                "Ask for the officer's business card, which New York officers "
                "must offer after many stops that do not end in arrest",
            ],
        },
    },
    "TX": {
        "traffic_stop": {
            "additional_rights": [
                "In Texas you are not required to give your name unless you "
                "are lawfully arrested, but giving a false name while detained "
                "is an offense (Penal Code 38.02)",
            ],
            "additional_dos": [
                "If you carry a handgun, tell the officer and show your license "
                "when asked for identification",
            ],
        },
    },
    "FL": {
        "traffic_stop": {
            "additional_dos": [
                "Florida drivers must show license, registration, and proof of "
                "insurance on request",
            ],
        },
        "protest": {
            "additional_rights": [
                "Florida requires consent of all parties to record private "
                "conversations, but recording police performing public duties "
                "is generally allowed",
            ],
        },
    },
    "IL": {
        "traffic_stop": {
            "additional_rights": [
                "Illinois allows recording of officers performing public "
                "duties in public places",
            ],
        },
        "arrest": {
            "additional_rights": [
                "In Illinois you have the right to make three phone calls "
                "within three hours of arrival at a place of detention",
            ],
        },
    },
    "WA": {
        "questioning": {
            "additional_dos": [
                "Washington requires consent to record private conversations; "
                "announce out loud that you are recording",
            ],
        },
    },
}
