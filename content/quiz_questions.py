LIKERT = {
  "option1Text": "Strongly disagree", "option1Value": 1,
  "option2Text": "Disagree", "option2Value": 2,
  "option3Text": "Not sure", "option3Value": 3,
  "option4Text": "Agree", "option4Value": 4,
  "option5Text": "Strongly agree", "option5Value": 5,
}

QUIZ_QUESTIONS = [
  {
    "_id": "q-break-down",
    "shortIdentifier": "break-down",
    "questionOrder": 1,
    "questionText": "When a task feels overwhelming, I break it into smaller steps before starting.",
    "questionCategory": "Start Coding Now",
    "questionWeight": 1,
    "isMindsetQuestion": True,
    **LIKERT,
  },
  {
    "_id": "q-stuck",
    "shortIdentifier": "stuck",
    "questionOrder": 2,
    "questionText": "Being stuck on a problem for an hour is normal, not a sign I should quit.",
    "questionCategory": "Start Coding Now",
    "questionWeight": 1,
    "isMindsetQuestion": True,
    **LIKERT,
  },
  {
    "_id": "q-why",
    "shortIdentifier": "why",
    "questionOrder": 3,
    "questionText": "I want to understand why something works, not just copy what works.",
    "questionCategory": "Learn Tech Thinking First",
    "questionWeight": 1,
    "isMindsetQuestion": True,
    **LIKERT,
  },
  {
    "_id": "q-tools-first",
    "shortIdentifier": "tools-first",
    "questionOrder": 4,
    "questionText": "I am mostly interested in which language or framework is the most popular right now.",
    "questionCategory": "Learn Tech Thinking First",
    "questionWeight": 1.5,
    "isMindsetQuestion": False,
    "option1Text": "Not at all", "option1Value": 1,
    "option2Text": "A little", "option2Value": 2,
    "option3Text": "Somewhat", "option3Value": 3,
    "option4Text": "Mostly", "option4Value": 4,
    "option5Text": "That is all I care about", "option5Value": 5,
  },
  {
    "_id": "q-routine",
    "shortIdentifier": "routine",
    "questionOrder": 5,
    "questionText": "I can set aside focused time every week, even when motivation is low.",
    "questionCategory": "Start Coding Now",
    "questionWeight": 1,
    "isMindsetQuestion": True,
    **LIKERT,
  },
  {
    "_id": "q-quick-money",
    "shortIdentifier": "quick-money",
    "questionOrder": 6,
    "questionText": "My main reason for learning to code is a fast, well-paid job.",
    "questionCategory": "Coding Isn't the Right Starting Point",
    "questionWeight": 1,
    "isMindsetQuestion": False,
    **LIKERT,
  },
  {
    "_id": "q-instructions",
    "shortIdentifier": "instructions",
    "questionOrder": 7,
    "questionText": "I prefer being told exactly what to do over figuring out an approach myself.",
    "questionCategory": "Coding Isn't the Right Starting Point",
    "questionWeight": 1,
    "isMindsetQuestion": False,
    **LIKERT,
  },
  {
    "_id": "q-systems",
    "shortIdentifier": "systems",
    "questionOrder": 8,
    "questionText": "I enjoy figuring out how the parts of a system depend on each other.",
    "questionCategory": "Learn Tech Thinking First",
    "questionWeight": 1,
    "isMindsetQuestion": False,
    **LIKERT,
  },
  {
    "_id": "q-feedback",
    "shortIdentifier": "feedback",
    "questionOrder": 9,
    "questionText": "Honest criticism of my work helps me more than encouragement does.",
    "questionCategory": "Start Coding Now",
    "questionWeight": 1,
    "isMindsetQuestion": True,
    **LIKERT,
  },
  {
    "_id": "q-frustration",
    "shortIdentifier": "frustration",
    "questionOrder": 10,
    "questionText": "If something does not click in the first week, I usually move on to something else.",
    "questionCategory": "Coding Isn't the Right Starting Point",
    "questionWeight": 1,
    "isMindsetQuestion": False,
    **LIKERT,
  },
]
